#!/usr/bin/env python
import sys

import pytest

from propcheck import enableLogging

def runtests(debug=False):
    enableLogging(debug)
    sys.exit(pytest.main(['tests/']))

if __name__ == '__main__':
    runtests(debug='--debug' in sys.argv)
