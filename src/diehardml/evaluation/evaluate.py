# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from diehardml.training.trainer import evaluate_model, evaluate_saved_model

__all__ = ["evaluate_model", "evaluate_saved_model"]
