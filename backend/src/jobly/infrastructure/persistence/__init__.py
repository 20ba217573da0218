"""Persistence - SQL helpers, table models and repositories"""
