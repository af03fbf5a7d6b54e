"""Integrations subpackage for castlist.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_canonical_stable`` fixture

The plugin module is not imported here so that the base install does not
require pytest.
"""

from __future__ import annotations

__all__: list[str] = []
