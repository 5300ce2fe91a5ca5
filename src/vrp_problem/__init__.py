"""VRP Problem Tools: validation of pragmatic-format routing problems.

The package checks the logical consistency of a problem definition (plan
and fleet) before it is handed to a solver. See `vrp_problem.validation`
for the rule engine and `vrp_problem.ingestion` for document loading.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
