import glob
import importlib.util
import logging
import os
import re
import sys

from .errors import ResolverLoadError


logger = logging.getLogger(__name__)


def load_resolvers_from_glob(pattern, *, registry):
    paths = [
        path
        for path in sorted(glob.glob(os.fspath(pattern), recursive=True))
        if os.path.isfile(path) and path.endswith(".py")
    ]
    logger.debug("Glob %s matched %d resolver files", pattern, len(paths))

    if not paths:
        raise ResolverLoadError("no resolver files match glob: {}".format(pattern))

    resolver_classes = []
    for path in paths:
        module = load_module_from_path(path)
        resolver_classes += registry.register_module(module)

    return resolver_classes


def load_module_from_path(path):
    path = os.path.realpath(path)

    module = _find_loaded_module(path)
    if module is not None:
        logger.debug("Reusing module %s for resolver file %s", module.__name__, path)
        return module

    module_name = _module_name_for_path(path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ResolverLoadError("cannot import resolver file: {}".format(path))

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        del sys.modules[module_name]
        raise

    logger.debug("Imported resolver file %s as module %s", path, module_name)
    return module


def _find_loaded_module(path):
    for module in list(sys.modules.values()):
        module_file = getattr(module, "__file__", None)
        if module_file is not None and os.path.realpath(module_file) == path:
            return module

    return None


def _module_name_for_path(path):
    return "_graphdecl_resolvers_" + re.sub(r"\W", "_", os.path.splitext(path)[0])
