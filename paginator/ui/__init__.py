from .components import create_page_table, format_page_caption

__all__ = ["create_page_table", "format_page_caption"]
