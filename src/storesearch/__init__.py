from .version import __version__ as __version__

__title__ = "StoreSearch"
__description__ = "An async client for searching the iTunes store catalog."
__license__ = "Apache-2.0"
