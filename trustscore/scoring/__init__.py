"""Scoring module for trustscore.

Implements the uncertainty-aware scoring pipeline:
  rating, n → normalize → Wilson lower bound / Beta-Binomial posterior
  → scored table → rank
"""
