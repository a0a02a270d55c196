from sitesearch.adapters.projects.adapter import ProjectAdapter

__all__ = ["ProjectAdapter"]
