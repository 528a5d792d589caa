#  Copyright (C) 2024  Cypheriel
from rich.console import Console

console = Console()
err_console = Console(stderr=True)
