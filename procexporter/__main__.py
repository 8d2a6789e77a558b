from procexporter.cli import app

app(prog_name="procexporter")
