import pytest

from block_kit.parsers import BlockParser, Node

POST = """<!-- wp:heading {"level":2} -->
<h2>Release notes</h2>
<!-- /wp:heading -->

<!-- wp:columns {"align":"wide"} -->
<div class="wp-block-columns"><!-- wp:column -->
<div class="wp-block-column"><!-- wp:paragraph -->
<p>Café ☕</p>
<!-- /wp:paragraph --></div>
<!-- /wp:column -->

<!-- wp:column -->
<div class="wp-block-column"><!-- wp:image {"id":7,"sizeSlug":"large"} /--></div>
<!-- /wp:column --></div>
<!-- /wp:columns -->

<!--more-->
<p>Legacy content</p>
<!-- wp:acme/gallery {"ids":[1,2,3],"caption":null} /-->"""


@pytest.fixture(scope="module")
def post() -> str:
    return POST


@pytest.fixture(scope="module")
def parsed_post(post: str) -> list[Node]:
    """Parse the sample post once, reuse across tests."""
    return BlockParser().parse(post)
