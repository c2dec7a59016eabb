"""Canned registry pages and a fake search client."""
from typing import List


class FakeSearchClient:
    """Stands in for RegistrySearchClient; records every search."""

    def __init__(self, html: str = ""):
        self.html = html
        self.calls: List[str] = []

    async def search(self, business_name: str) -> str:
        self.calls.append(business_name)
        return self.html


TABLE_PAGE = """
<html><body>
<table>
  <tr><th>Company Name</th><th>RC Number</th></tr>
  <tr><td>Bluewave Logistics Limited</td><td>RC-778899</td></tr>
  <tr><td>Acme Nigeria Ltd</td><td>RC-123456</td></tr>
</table>
</body></html>
"""

NO_RESULTS_PAGE = """
<html><body>
<h2>Search results</h2>
<p>No records found for your search.</p>
</body></html>
"""

LANDING_PAGE = """
<html><head><meta name="csrf-token" content="meta-token-123"></head>
<body><form action="/home/search" method="post">
<input type="hidden" name="_token" value="input-token-456">
<input name="search_term">
</form></body></html>
"""

TEST_OVERRIDES = {
    "techtasker solutions limited": {
        "official_name": "TECHTASKER SOLUTIONS LIMITED",
        "rc_number": "1582539",
    },
}
