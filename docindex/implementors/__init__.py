"""Implementor tables — which types implement a trait, per package.

A generated fragment carries one ImplementorTable for one trait. Evaluating
the fragment hands the table to the page's aggregator through the handoff
registry, or parks it in the pending slot until the aggregator attaches.
"""
