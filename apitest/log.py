# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import logging

import coloredlogs

from apitest.settings import DEBUG


def install(debug=None):
    if debug is None:
        debug = DEBUG
    coloredlogs.install(logging.DEBUG if debug else logging.INFO)
