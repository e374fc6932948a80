# SPDX-License-Identifier: Apache-2.0
from .server.main import main

main()
