"""Auto-discovery of check modules.

Every .py file in this package that defines a `check` object is
auto-registered by cvd_checker.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports, keep this list in sync with check modules
import cvd_checker.checks.all as _all  # noqa: F401
import cvd_checker.checks.cbcontrast as _cbcontrast  # noqa: F401
import cvd_checker.checks.contrast as _contrast  # noqa: F401
import cvd_checker.checks.swatches as _swatches  # noqa: F401
