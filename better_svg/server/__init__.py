"""HTTP API package (FastAPI).

WHY: Non-Python clients need the transcoder and the optimizer bridge
over HTTP. app.py holds the routes; models.py the pydantic schemas.
"""
