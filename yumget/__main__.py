# SPDX-License-Identifier: GPL-3.0-or-later
from yumget.interface.cli import app

if __name__ == "__main__":
    app()
