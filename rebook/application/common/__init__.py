from .pagination import MAX_PAGE_SIZE, Page, PageRequest

__all__ = ["MAX_PAGE_SIZE", "Page", "PageRequest"]
