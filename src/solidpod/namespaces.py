"""Useful namespaces for use with `rdflib` code."""

from typing import Optional

from rdflib import Namespace, Graph
from rdflib.namespace import NamespaceManager

dcterms = Namespace('http://purl.org/dc/terms/')
"""[Dublin Core Terms](https://www.dublincore.org/specifications/dublin-core/dcmi-terms/#section-2)"""

ldp = Namespace('http://www.w3.org/ns/ldp#')
"""[Linked Data Platform](https://www.w3.org/TR/ldp/)"""

rdf = Namespace('http://www.w3.org/1999/02/22-rdf-syntax-ns#')
"""[RDF](https://www.w3.org/TR/rdf-schema/)"""

solid = Namespace('http://www.w3.org/ns/solid/terms#')
"""[Solid Terms](https://solidproject.org/TR/protocol)"""

namespace_manager = NamespaceManager(Graph())
namespace_manager.bind('dcterms', dcterms)
namespace_manager.bind('ldp', ldp)
namespace_manager.bind('rdf', rdf)
namespace_manager.bind('solid', solid)


def get_manager(graph: Optional[Graph] = None) -> NamespaceManager:
    """Return a namespace manager with the prefixes above bound. If `graph`
    is given, its manager is returned with the same bindings added."""
    if graph is None:
        return namespace_manager
    for prefix, ns in namespace_manager.namespaces():
        graph.namespace_manager.bind(prefix, ns)
    return graph.namespace_manager
