"""
University Records

In-memory object model for a small university: people, courses, departments,
grade books and enrollment tracking, with a category-tagged error hierarchy.
"""

__version__ = "0.3.0"
