"""
CVSift - CV filtering, job matching and Employment Equity compliance.

FastAPI backend for recruitment teams: a searchable CV library, job
specifications with CV-to-job scoring, team workspaces and the South African
Employment Equity Act reporting module.
"""

__version__ = "1.0.0"
