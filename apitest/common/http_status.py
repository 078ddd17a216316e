# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.


def success(code):
    return 200 <= code < 400


def client_error(code):
    return 400 <= code < 500


def server_error(code):
    return code >= 500
