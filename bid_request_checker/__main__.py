from bid_request_checker.cli import app

app()
