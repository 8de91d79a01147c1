# Licensed under the Apache License, Version 2.0
from .cli.app import app

app(prog_name="lister")
