"""Set up the main cart_prod namespace."""

import logging

from cart_prod.version import __version__

from cart_prod.product import PairProduct, TripleProduct, lazy_product
from cart_prod.utils.iteration import NotRestartableError, Restartable

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NotRestartableError",
    "PairProduct",
    "Restartable",
    "TripleProduct",
    "__version__",
    "lazy_product",
]


def test(**kwargs):
    """
    Run cart_prod tests. This requires the test extra to be installed.
    All arguments are forwarded to pytest.main
    """
    try:
        import pytest
    except ImportError:
        print("Need pytest to run tests")
        return
    args = ['--pyargs', 'cart_prod.tests']
    retcode = pytest.main(args, **kwargs)
    return retcode


test.__test__ = False  # type: ignore # Don't try to run this method as a test
