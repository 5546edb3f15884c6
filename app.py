"""Entry point for Streamlit deployment - redirects to app/app.py"""
import os
import runpy
import sys

root = os.path.dirname(os.path.abspath(__file__))
# Hosted deployments may run without `pip install -e .`
sys.path.insert(0, os.path.join(root, "src"))
runpy.run_path(os.path.join(root, "app", "app.py"), run_name="__main__")
