from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import versioningit

try:
    __version__ = version("cart-prod")
except PackageNotFoundError:
    # running from a source checkout that was never installed
    pyprojectpath = Path(__file__).resolve().parent.parent
    __version__ = versioningit.get_version(project_dir=pyprojectpath)
