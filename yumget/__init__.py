# SPDX-License-Identifier: GPL-3.0-or-later
APP_NAME = "yum-get"
__version__ = "0.1.0"
