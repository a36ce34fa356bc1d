"""
repositories/ - Data Access Layer
==================================
In-memory collections that own domain records for the lifetime of a
service. Keyed repositories enforce unique identifiers, linear repositories
keep insertion order with first-match lookups, and grouping indexes are
derived read-only views rebuilt on request.
"""
