"""scrap-paper -- a scratch surface with a bounded, cyclable history of saved snapshots."""

__version__ = '0.3.0'
