# -*- coding: utf-8 -*-
"""Location: ./api_version/middleware/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Middleware package for API version negotiation.

Provides the HTTP middleware rewriting request paths to carry an explicit
version prefix.
"""
