"""Services Layer: one resource controller per resource.

Invariants:
    - Controllers receive their DocumentStore at construction, never import one
    - Every controller operation funnels failures through classify_failure once
"""
