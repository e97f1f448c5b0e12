"""
Core pipeline for jlox: IR, errors, configuration, and the expression front end.
"""
