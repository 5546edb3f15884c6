"""AI Bias Auditor.

Collects a dataset/model description and protected attributes, asks a
language model for a structured bias audit and turns the reply into a
report with JSON, CSV and PDF exports.
"""

__version__ = "0.1.0"
