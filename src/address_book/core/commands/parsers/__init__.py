"""
Command parsers with auto-discovery.

This module imports every parser module in this package, triggering their
self-registration with the command parser registry. Drop a new parser file in
this directory with a ``command_parser_registry.register_command()`` call at
module level and it is picked up automatically.
"""

import importlib
import logging
import pkgutil
from pathlib import Path

logger = logging.getLogger(__name__)

_current_dir = Path(__file__).parent

for module_info in pkgutil.iter_modules([str(_current_dir)]):
    module_name = module_info.name

    if module_name.startswith("_") or module_info.ispkg:
        continue

    # Import the module to trigger command registration side effects
    importlib.import_module(f".{module_name}", package=__package__)
    logger.debug(f"Auto-discovered and imported parser module: {module_name}")
