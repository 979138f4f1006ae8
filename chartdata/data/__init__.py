"""
Numeric data model and ingestion.

Range intervals, keyed one- and two-dimensional values, the CategoryTable
builder, aggregate utilities and CSV parsing.
"""
