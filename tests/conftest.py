import pytest
from bs4 import BeautifulSoup


CONCERT_HTML = """
<html>
<head><title>The Band: Tiny Desk Concert : NPR</title></head>
<body>
  <div class="storytitle"><h1>The Band: Tiny Desk Concert</h1></div>
  <div class="dateblock"><time datetime="2024-03-18T11:00:00-04:00">March 18, 2024</time></div>
  <div id="storytext">
    <p>The Band squeezed behind the desk on a Monday.</p>
    <p>It was loud.</p>
    <p><strong>SET LIST</strong></p>
    <ul>
      <li>"Song A"</li>
      <li>'Song B'</li>
      <li>  Song C  </li>
    </ul>
    <p><strong>MUSICIANS</strong></p>
    <ul>
      <li>John Doe: Guitar</li>
      <li>Jane Roe</li>
      <li>A: B: C</li>
    </ul>
    <p><strong>CREDITS</strong></p>
  </div>
</body>
</html>
"""


@pytest.fixture
def concert_html() -> str:
    return CONCERT_HTML


@pytest.fixture
def concert_soup() -> BeautifulSoup:
    return BeautifulSoup(CONCERT_HTML, "html.parser")
