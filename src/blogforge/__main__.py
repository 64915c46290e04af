from blogforge.cli.app import app

app()
