# vulture_whitelist.py
# Known false positives - not dead code

from mockery.plugin import _mockery_mocker

_ = _mockery_mocker  # autouse fixture, collected by pytest through the pytest11 entry point
