from __future__ import annotations

from typing import Any, Hashable, Tuple

# Opaque vertex identifier; any hashable value.
Node = Hashable

# (identifier, label); classification only looks at the identifier.
LNode = Tuple[Hashable, Any]
