"""rdflib adapter for the string term encoding.

Converts terms to and from rdflib nodes, and string quads to and from
rdflib Datasets, so string-encoded terms can be loaded into a graph and
serialized with any rdflib format.

Example:
    from rdfstring.adapters.rdf import string_quads_to_dataset

    dataset = string_quads_to_dataset(records)
    print(dataset.serialize(format="nquads"))
"""

from rdfstring.adapters.rdf.bridge import (
    dataset_to_string_quads,
    from_rdflib,
    quad_from_rdflib,
    quad_to_rdflib,
    rdflib_to_string,
    string_quads_to_dataset,
    string_to_rdflib,
    to_rdflib,
)

__all__ = [
    # Terms
    "to_rdflib",
    "from_rdflib",
    "string_to_rdflib",
    "rdflib_to_string",
    # Quads
    "quad_to_rdflib",
    "quad_from_rdflib",
    "dataset_to_string_quads",
    "string_quads_to_dataset",
]
