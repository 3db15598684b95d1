"""
Shared query engine.

Responsibilities:
- Evaluate the query / category / atmosphere / price / dietary / amenity facets as one conjunction.
- Delegate every variant-specific decision to an injected ``CatalogStrategy``.
- Apply the stable multi-key sorts over the filtered result.
"""
