# -*- coding: utf-8 -*-
"""Routers for the API version gateway application."""
