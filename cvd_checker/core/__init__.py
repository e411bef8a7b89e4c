"""cvd_checker.core: Foundation layer.

Contains the colour types, deficiency simulation, contrast maths, threshold
policy, finding registry, candidates loader and report builder.
This module has NO dependencies on cvd_checker.checks or cvd_checker.registry.
Only stdlib and numpy are allowed here.
"""
