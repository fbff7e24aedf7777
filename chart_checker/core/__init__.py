"""chart_checker.core — Foundation layer.

Contains the expectation table, type definitions, HTML scanner, asset
decoder, configuration and report builder.
This module has NO dependencies on chart_checker.validator.
Only stdlib is allowed here.
"""
