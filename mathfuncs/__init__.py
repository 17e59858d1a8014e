r"""@package mathfuncs

Closed algebra of single-variable real functions.

The actual function classes live in the mathfuncs.functions sub package.
Numerical helpers shared by them are collected in mathfuncs.numutils and
mathfuncs.utils.
"""
