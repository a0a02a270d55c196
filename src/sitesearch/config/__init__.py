from sitesearch.config.settings import Settings

__all__ = ["Settings"]
