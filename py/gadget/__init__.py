# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0
