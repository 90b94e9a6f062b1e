"""
Core transformation components: syntax tree, property model and class synthesis.
"""
