import logging

from rdflib import Graph
from rdflib.plugins.parsers.notation3 import BadSyntax

from solidpod.namespaces import dcterms, get_manager, ldp

logger = logging.getLogger(__name__)

BASIC_CONTAINER_LINK = '<http://www.w3.org/ns/ldp/BasicContainer>; rel="type"'
"""`Link` header value marking a POST as the creation of a basic container"""

DEFAULT_CONTAINER_DESCRIPTION = 'Container created by agents'

# see https://www.w3.org/TR/ldp-primer/#creating-containers-and-structural-hierarchy
CONTAINER_TEMPLATE = (
    f'@prefix ldp: <{ldp}>.\n'
    f'@prefix dcterms: <{dcterms}>.\n'
    '<> a ldp:Container, ldp:BasicContainer, ldp:Resource;\n'
    'dcterms:title "{title}";\n'
    'dcterms:description "{description}" .'
)


def container_description(title: str, description: str = DEFAULT_CONTAINER_DESCRIPTION) -> str:
    """Turtle document used as the body of a container creation request.

    The title is inserted as-is; a title containing a double quote produces
    a document that is not valid Turtle."""
    return CONTAINER_TEMPLATE.format(title=title, description=description)


def log_properties(turtle: str):
    """Log the triples in a Turtle document at debug level. If the document
    cannot be parsed, log a warning instead; the document is still sent."""
    graph = Graph()
    nsm = get_manager(graph)
    try:
        graph.parse(data=turtle, format='turtle')
    except BadSyntax as e:
        logger.warning(f'Container description is not valid Turtle: {e}')
        return
    logger.debug('Including properties:')
    for _, p, o in graph:
        logger.debug(f'  {p.n3(namespace_manager=nsm)} {o.n3(namespace_manager=nsm)}')
