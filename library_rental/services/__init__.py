"""
Business logic services package.

WHY: Services contain the rental rules, separated from data access,
following the two-layer architecture (Service → DAO).
"""
