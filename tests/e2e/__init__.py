#!/usr/bin/env python3
"""
End-to-end tests for the expenses package.

These tests execute CLI commands via subprocess to validate complete
sessions from the operator's perspective.
"""
