"""
Gating and dispatch engine for Gatelog.
"""
