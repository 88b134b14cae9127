import httpx
import pytest
from bs4 import BeautifulSoup

from backend.scraper.config import SQUAD_ROW_SELECTOR

HUGO_IMAGE = "https://img.a.transfermarkt.technology/portrait/medium/574901-1673960343.jpg?lm=1"
FLAMENGO_SMALL = "https://tmssl.akamaized.net//images/wappen/verysmall/614.png?lm=1551023331"
FLAMENGO_BADGE = "https://tmssl.akamaized.net//images/wappen/kaderquad/614.png?lm=1551023331"
LAZY_PLACEHOLDER = "data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"


def build_row(
    name="Hugo Souza",
    player_href="/hugo-souza/profil/spieler/574901",
    position="Goleiro",
    shirt_number="1",
    image=HUGO_IMAGE,
    birth="31/01/1999 (25)",
    nationalities=("Brasil",),
    height="1,99 m",
    foot="direito",
    joined="10/07/2024",
    last_club=True,
    contract_until="31/12/2024",
    market_value="4,00 mi. €",
    injury=False,
    captain=False,
    suspension=False,
    transfer_badge=True,
    row_class="odd",
):
    """Render one squad table row shaped like the Transfermarkt markup."""
    markers = ""
    if captain:
        markers += '<span class="kapitaenicon-table icons_sprite" title="Capitão"></span>'
    if injury:
        markers += '<span class="verletzt-table icons_sprite" title="Lesão muscular"></span>'
    if suspension:
        markers += '<span class="ausfall-1-table icons_sprite" title="Suspenso"></span>'

    badge = ""
    if transfer_badge:
        badge = (
            '<span class="wechsel-kader-wappen hide-for-small">'
            '<a title="Emprestado do: CR Flamengo; Até: 31/12/2024" href="/cr-flamengo/startseite/verein/614">'
            f'<img src="{FLAMENGO_BADGE}" title="CR Flamengo" alt="CR Flamengo"></a></span>'
        )

    flags = "".join(
        f'<img src="https://tmssl.akamaized.net//images/flagge/verysmall/1.png" '
        f'title="{country}" alt="{country}" class="flaggenrahmen">'
        for country in nationalities
    )

    last_club_cell = ""
    if last_club:
        last_club_cell = (
            '<td class="zentriert">'
            '<a title="CR Flamengo" href="/cr-flamengo/startseite/verein/614/saison_id/2023">'
            f'<img src="{FLAMENGO_SMALL}" title="CR Flamengo" alt="CR Flamengo" class=""></a></td>'
        )

    portrait = ""
    if image is not None:
        portrait = f'<img data-src="{image}" src="{LAZY_PLACEHOLDER}" title="{name}" class="bilderrahmen-fixed lazy">'

    return f"""
    <tr class="{row_class}">
      <td class="zentriert rueckennummer bg_Torwart" title="{position}"><div class="rn_nummer">{shirt_number}</div></td>
      <td class="posrela">
        <table class="inline-table">
          <tr>
            <td rowspan="2">{portrait}</td>
            <td class="hauptlink">
              <a href="{player_href}">
                {name}
              </a>{markers}{badge}
            </td>
          </tr>
          <tr><td>
            {position}
          </td></tr>
        </table>
      </td>
      <td class="zentriert">{birth}</td>
      <td class="zentriert">{flags}</td>
      <td class="zentriert">{height}</td>
      <td class="zentriert">{foot}</td>
      <td class="zentriert">{joined}</td>
      {last_club_cell}
      <td class="zentriert">{contract_until}</td>
      <td class="rechts hauptlink"><a href="{player_href.replace('profil', 'marktwertverlauf')}">{market_value}</a></td>
    </tr>
    """


def build_page(rows):
    """Wrap rows into a squad page."""
    return f"""
    <html><head><title>Elenco</title></head><body>
    <div class="responsive-table">
      <table class="items">
        <thead><tr><th>#</th><th>Jogador</th><th>Nasc./Idade</th></tr></thead>
        <tbody>{''.join(rows)}</tbody>
      </table>
    </div>
    </body></html>
    """


def select_rows(html):
    return BeautifulSoup(html, "html.parser").select(SQUAD_ROW_SELECTOR)


@pytest.fixture
def row_factory():
    """Build a parsed <tr> element from build_row keyword arguments."""
    def _make(**kwargs):
        return select_rows(build_page([build_row(**kwargs)]))[0]
    return _make


@pytest.fixture
def squad_html():
    return build_page([
        build_row(row_class="odd"),
        build_row(
            name="Gabriel Barbosa",
            player_href="/gabriel-barbosa/profil/spieler/288255",
            position="Centroavante",
            shirt_number="99",
            image="https://img.a.transfermarkt.technology/portrait/medium/288255.jpg?lm=1",
            birth="30/08/1996 (28)",
            nationalities=("Brasil", "Portugal"),
            height="1,78 m",
            foot="esquerdo",
            joined="01/01/2025",
            contract_until="31/12/2028",
            market_value="12,00 mi. €",
            captain=True,
            transfer_badge=False,
            row_class="even",
        ),
        build_row(
            name="Wesley",
            player_href="/wesley/profil/spieler/900001",
            position="Lateral Dir.",
            shirt_number="43",
            birth="06/09/2003 (21)",
            nationalities=(),
            height="",
            foot="",
            market_value="500 mil €",
            injury=True,
            last_club=False,
            transfer_badge=False,
            row_class="odd",
        ),
    ])


@pytest.fixture
def fake_upstream(monkeypatch):
    """Serve fixed HTML for every outbound GET and record requested URLs."""
    calls = []

    def _install(html="", status_code=200, error=None):
        def fake_get(url, headers=None, timeout=None, follow_redirects=None):
            calls.append({"url": url, "headers": headers, "timeout": timeout})
            if error is not None:
                raise error
            return httpx.Response(
                status_code, text=html, request=httpx.Request("GET", url)
            )

        monkeypatch.setattr("backend.scraper.http_utils.httpx.get", fake_get)
        return calls

    return _install
