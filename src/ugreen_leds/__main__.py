"""Allow ``python -m ugreen_leds``."""

from .cli import app

if __name__ == "__main__":
    app(prog_name="ugreen_leds_cli")
