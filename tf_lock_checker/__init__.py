"""Terraform/Terragrunt lock checker."""

__version__ = "0.1.0"
