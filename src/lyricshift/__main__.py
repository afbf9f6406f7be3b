from lyricshift.cli import app

app()
