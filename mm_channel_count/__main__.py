from .cli import app

app(prog_name="mm-channel-count")
