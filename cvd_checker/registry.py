"""Check registry.

Every public module in cvd_checker/checks/ exposes one `check` object. Helper
modules (leading underscore, e.g. _annotate) hold shared code and never
register anything. Names must be unique across modules.
"""

import importlib
import pkgutil

from cvd_checker.core.types import Check

_registry: dict[str, Check] = {}

# pkgutil sees nothing inside a PyInstaller binary
_CHECK_MODULES = [
    'all',
    'cbcontrast',
    'contrast',
    'swatches',
]


def _is_helper(modname: str) -> bool:
    return modname.startswith('_')


def _check_module_names() -> list[str]:
    import cvd_checker.checks as pkg

    names = [modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__)]
    return [name for name in (names or _CHECK_MODULES) if not _is_helper(name)]


def discover() -> dict[str, Check]:
    """Import all check modules and return the registry."""
    if _registry:
        return _registry

    for modname in _check_module_names():
        module = importlib.import_module(f'cvd_checker.checks.{modname}')
        found = getattr(module, 'check', None)
        if not isinstance(found, Check):
            continue
        if found.name in _registry:
            raise ValueError(f'check name {found.name!r} registered twice (cvd_checker.checks.{modname})')
        _registry[found.name] = found

    return _registry


def get(name: str) -> Check:
    """Get a check by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown check: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_checks() -> dict[str, Check]:
    return discover()
