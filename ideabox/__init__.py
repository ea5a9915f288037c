"""
Idea Board - submit, list, develop and delete ideas.
"""

__version__ = "1.0.0"
