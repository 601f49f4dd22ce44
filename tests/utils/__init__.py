"""
Test utilities package for Linguae tests.

## Available Modules

### sources.py
- `StaticSource`: in-memory translation source that records loads and can
  simulate a failing backend
- `json_response()`: build an ``httpx.Response`` with a JSON body
"""
