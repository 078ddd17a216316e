# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import os

DEBUG = os.environ.get("APITEST_DEBUG", None) == 'true'
