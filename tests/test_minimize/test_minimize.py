"""Tests for minimize: stylesheet in, pruned and compressed stylesheet out."""

import pytest

from minimalcss import Options, SelectorSyntaxError, StyleParseError, minimize
from minimalcss.stylesheet import AtRule

LATO = """
@font-face {
  font-family: 'Lato';
  font-style: normal;
  font-weight: 400;
  src: local('Lato Regular'), url(https://fonts.example.com/lato.woff2) format('woff2');
}
"""


def _final_css(html: str, css: str, **kwargs) -> str:
    return minimize(html, css, Options(**kwargs)).final_css


# ---------------------------------------------------------------------------
# Basics
# ---------------------------------------------------------------------------


class TestBasics:
    def test_returns_result(self):
        result = minimize("<html><h1>Header</h1></html>", "h1, h2, h3 { color: blue }")
        assert isinstance(result.final_css, str)
        assert isinstance(result.size_before, int)
        assert isinstance(result.size_after, int)

    def test_only_matching_selectors_kept(self):
        html = "<html><h1>Header</h1></html>"
        css = "h1, h2, h3 { color: blue }\nol, li { color: blue }"
        assert _final_css(html, css) == "h1{color:blue}"

    def test_reduce_selectors(self):
        html = """
        <!doctype html>
        <html>
            <head><title>Example</title></head>
            <body>
                <h1>Header</h1>
                <div class="ingress"><p>Sample text</p></div>
            </body>
        </html>
        """
        css = """
        html { border: 0; }
        body, section { padding: 0; }
        h1, h2, h3 { color: black; }
        h1 { border: 1px solid red; }
        div.ingress p { font-weight: bold; }
        div.ingress em { font-weight: normal; }
        """
        final = _final_css(html, css)
        assert "h1{color:black;border:1px solid red}" in final
        assert "body{padding:0}" in final
        assert "h2" not in final
        assert "h3" not in final
        assert "section" not in final
        assert "div.ingress p{font-weight:bold}" in final
        assert "div.ingress em" not in final

    def test_sizes(self):
        css = "h1, h2 { color: blue }"
        result = minimize("<h1>x</h1>", css)
        assert result.size_before == len(css)
        assert result.size_after == len(result.final_css)
        assert result.size_after < result.size_before

    def test_trees_exposed(self):
        css = "@keyframes Unused { to { top: 0 } } h1 { color: red }"
        result = minimize("<h1>x</h1>", css)
        assert isinstance(result.tree.children[0], AtRule)
        assert len(result.final_tree.children) == 1

    def test_calls_do_not_share_state(self):
        css = "h1 { color: red } p { color: blue }"
        assert _final_css("<h1>x</h1>", css) == "h1{color:red}"
        assert _final_css("<p>x</p>", css) == "p{color:blue}"

    def test_idempotent(self):
        html = '<div class="ingress"><p>x</p></div><h1>y</h1>'
        css = "h1, h2 { color: red } div.ingress p, div em { margin: 0 }"
        once = _final_css(html, css)
        assert _final_css(html, once) == once

    def test_compress_selectors_from_multiple_sources(self):
        html = "<html><h1>Header</h1></html>"
        css = "h1 { color: blue }\nh1 { font-weight: bold }"
        final = _final_css(html, css)
        assert final == "h1{color:blue;font-weight:bold}"
        assert final.count("h1") == 1

    def test_merge_inside_media(self):
        html = "<p>x</p>"
        css = "@media screen { p { color: red } b { color: blue } p { margin: 0 } }"
        assert _final_css(html, css) == "@media screen{p{color:red;margin:0}}"


class TestMediaQueries:
    def test_understands_media_queries(self):
        html = '<html><h1>Header</h1><a href="">Link</a></html>'
        css = """
        @media only screen
        and (min-device-width: 414px)
        and (-webkit-min-device-pixel-ratio: 3) {
          a { color: red }
        }

        @media only screen
        and (min-device-width: 375px) {
          b { color: green }
        }
        """
        final = _final_css(html, css)
        assert "a{color:red}" in final
        assert "b{color:green}" not in final
        assert final.count("@media") == 1

    def test_print_media_always_removed(self):
        html = '<html><h1>Header</h1><a href="">Link</a></html>'
        assert _final_css(html, "@media print { a { color: red } }") == ""


class TestFontFace:
    def test_keep_font_face(self):
        html = '<html><a href="" class="SomeSelector">Link</a></html>'
        css = LATO + ".SomeSelector { font-family: 'Lato'; }"
        final = _final_css(html, css)
        assert '.SomeSelector{font-family:"Lato"}' in final
        assert '@font-face{font-family:"Lato"' in final

    def test_remove_unused_font_face(self):
        html = '<html><h1>Header</h1><a href="">Link</a></html>'
        css = LATO + "div.foo { font-family: Lato, Helvetica; }"
        assert _final_css(html, css) == ""

    def test_remove_one_keep_one(self):
        html = '<html><h1>Header</h1><a href="">Link</a></html>'
        css = (
            LATO
            + "@font-face { font-family: Elseness; font-style: normal; }"
            + "a[href] { font-family: Foobar, 'Lato'; }"
        )
        final = _final_css(html, css)
        assert '@font-face{font-family:"Lato"' in final
        assert 'a[href]{font-family:Foobar,"Lato"}' in final
        assert "Elseness" not in final


class TestKeyframes:
    KEYFRAMES = """
    @keyframes RotateSlot {
      3% { margin-top: -2em }
      from { transform: rotate(0deg) }
    }
    """

    def test_keep_keyframes(self):
        html = '<html><a href="" class="SomeSelector">Link</a></html>'
        css = self.KEYFRAMES + ".SomeSelector { animation: RotateSlot infinite 5s linear; }"
        final = _final_css(html, css)
        assert ".SomeSelector{animation:RotateSlot" in final
        assert "@keyframes RotateSlot" in final

    def test_remove_keyframes(self):
        html = '<html><a href="" class="SomeSelector">Link</a></html>'
        css = self.KEYFRAMES + "never.heardof { animation: RotateSlot infinite 5s linear; }"
        assert _final_css(html, css) == ""

    def test_remove_one_keep_one(self):
        html = "<html><h1>Header</h1></html>"
        css = (
            self.KEYFRAMES
            + "@keyframes slidein { from { transform: translateX(0%); } to { transform: translateX(100%); } }"
            + "h1 { animation-duration: 3s; animation-name: slidein; }"
        )
        final = _final_css(html, css)
        assert "h1{animation-duration:3s;animation-name:slidein}" in final
        assert "@keyframes slidein" in final
        assert "@keyframes RotateSlot" not in final


class TestDomTrees:
    def test_looks_inside_all_subtrees(self):
        html = """
        <html>
          <div>
            <p><b>Bold</b></p>
            <p><i>Italic</i></p>
          </div>
        </html>
        """
        assert _final_css(html, "div p i { color: pink }") == "div p i{color:pink}"

    def test_inputs_by_type(self):
        html = """
        <form>
          <input name="text">
          <input type="password" name="password">
        </form>
        """
        css = """
        input { color: pink }
        input[type="email"],
        input[type="password"],
        input[type="search"],
        input[type="text"] {
          -webkit-appearance: none;
        }
        """
        final = _final_css(html, css)
        assert "input{color:pink}" in final
        assert 'input[type="password"]{-webkit-appearance:none}' in final
        assert "email" not in final
        assert "search" not in final
        assert 'type="text"' not in final


# ---------------------------------------------------------------------------
# Weird selectors
# ---------------------------------------------------------------------------


class TestWeirdos:
    def test_before_and_after(self):
        html = "<html><h1>Header</h1></html>"
        css = """
        a::after { content: "x" }
        h1:after { text-decoration: underline }
        a::before, h1:before { content: "y"; }
        """
        final = _final_css(html, css)
        assert "h1:after{text-decoration:underline}" in final
        assert 'h1:before{content:"y"}' in final
        assert "a:" not in final

    def test_always_keep_wildcards(self):
        html = "<html><h1>Header</h1></html>"
        css = """
        *,
        :after,
        :before {
          box-sizing: inherit;
        }
        html, body {
          box-sizing: border-box;
        }
        """
        final = _final_css(html, css)
        assert "*,:after,:before{box-sizing:inherit}" in final
        assert "html{box-sizing:border-box}" in final

    def test_backslashes(self):
        html = '<html><h1 class="md:title">Header</h1></html>'
        assert _final_css(html, r".md\:title { font-size: 32px; }") == r".md\:title{font-size:32px}"

    def test_escaped_colon_with_pseudo_class(self):
        html = '<a href="#" class="hover:color-bg-accent">Link</a>'
        css = r".hover\:color-bg-accent:hover { color: pink; }"
        assert r".hover\:color-bg-accent:hover{color:pink}" in _final_css(html, css)


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class TestOptions:
    def test_stats_comment(self):
        html = "<html><h1>Header</h1></html>"
        css = "h1, h2, h3 { color: blue }\nol, li { color: blue }"
        result = minimize(html, css, Options(include_stats_comment=True))
        first_line = result.final_css.split("\n")[0]
        assert first_line == (
            f"/* length before: {result.size_before} length after: {result.size_after} */"
        )
        assert result.final_css.endswith("h1{color:blue}")

    def test_exclamation_comments_kept_by_default(self):
        final = _final_css("<h1>x</h1>", "/*! license */\n/* plain */\nh1 { color: red }")
        assert "/*! license */" in final
        assert "plain" not in final

    def test_remove_exclamation_comments(self):
        css = "/*! license */\nh1 { color: red }"
        assert _final_css("<h1>x</h1>", css, remove_exclamation_comments=True) == "h1{color:red}"

    def test_no_compress(self):
        assert _final_css("<h1>x</h1>", "h1,h2{color:red}", compress=False) == (
            "h1 { color: red; }"
        )

    def test_remove_exclamation_comments_without_compress(self):
        css = "/*! lic */ h1 { color: red }"
        final = _final_css("<h1>x</h1>", css, remove_exclamation_comments=True, compress=False)
        assert final == "h1 { color: red; }"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_style_parse_error(self):
        with pytest.raises(StyleParseError):
            minimize("<h1>x</h1>", "} not valid CSS::")

    def test_selector_syntax_error(self):
        with pytest.raises(SelectorSyntaxError) as excinfo:
            minimize("<h1>x</h1>", "h1 div!x { color: red }")
        assert excinfo.value.selector == "h1 div!x"
