# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Python code generator for resolved YANG schema trees."""
