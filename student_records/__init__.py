"""
Student Records: console manager for student records kept in a CSV file and
a relational database.
"""

__version__ = "0.1.0"
