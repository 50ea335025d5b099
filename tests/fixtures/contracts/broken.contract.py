Contract = {
    "path": "/broken",
    "method": "get",
