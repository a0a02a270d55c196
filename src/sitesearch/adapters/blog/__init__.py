from sitesearch.adapters.blog.adapter import BlogAdapter

__all__ = ["BlogAdapter"]
