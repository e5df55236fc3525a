"""
Cross-cutting infrastructure for Gatelog: diagnostics and error taxonomy.
"""
