from .main import app

app(prog_name="e2e-lint")
