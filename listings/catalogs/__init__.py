"""
Catalog services.

Responsibilities:
- Bind the shared query engine to each listing variant (hotels, restaurants,
  bars, cafés, street food, eco-lodges, rentals) through a strategy.
- Hold each variant's filter vocabulary and its variant-only second-pass filters.
- Load catalog snapshots from the JSON data files and build the registry once per process.
"""
