"""Statement compilation for Terrific compiler.

- basic: literal text and ``{{ }}`` output
- components: ``{% component %}`` / ``{% view %}`` render calls
"""

from __future__ import annotations

from terrific.compiler.statements.basic import BasicStatementMixin
from terrific.compiler.statements.components import ComponentCompilationMixin


class StatementCompilationMixin(BasicStatementMixin, ComponentCompilationMixin):
    """Combined mixin for compiling all statement types."""
