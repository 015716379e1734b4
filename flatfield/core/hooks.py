"""Value transform hooks for fields.

``TransformHooks`` holds an optional pre-transform, applied to the raw value
before it is formatted, and an ordered chain of post-transforms, applied to
the rendered string afterwards. The field only stores them; the record
assembler decides when to call :meth:`TransformHooks.apply_post`.

Unlike observability hooks, transform errors are not swallowed: a transform
that raises changes the data, so the exception reaches the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from .exceptions import NotCallableError

Transform = Callable[[Any], Any]


@dataclass
class TransformHooks:
    """Container for the pre-transform and the post-transform chain."""

    pre: Optional[Transform] = None
    post: List[Transform] = field(default_factory=list)

    def set_pre(self, fn: Optional[Transform], name: Optional[str] = None) -> None:
        """Replace the pre-transform. ``None`` clears it.

        Raises:
            NotCallableError: If *fn* is neither ``None`` nor callable.
        """
        _check_callable(fn, name)
        self.pre = fn

    def add_post(self, fn: Optional[Transform], name: Optional[str] = None) -> None:
        """Append *fn* to the post-transform chain. ``None`` is ignored.

        Raises:
            NotCallableError: If *fn* is neither ``None`` nor callable.
        """
        _check_callable(fn, name)
        if fn is not None:
            self.post.append(fn)

    def apply_pre(self, value: Any) -> Any:
        if self.pre is None:
            return value
        return self.pre(value)

    def apply_post(self, text: Any) -> Any:
        """Run every post-transform over *text*, in registration order."""
        for fn in self.post:
            text = fn(text)
        return text


def _check_callable(fn: Any, name: Optional[str]) -> None:
    if fn is not None and not callable(fn):
        raise NotCallableError(f"Cannot call function: {fn!r} is not callable", name)
