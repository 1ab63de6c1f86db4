from typing import TextIO

from wikibase_rdf.rdf_builder.ontology.datatypes import get_owl_type
from wikibase_rdf.rdf_builder.property_registry.models import PropertyShape
from wikibase_rdf.rdf_builder.writers.prefixes import TURTLE_PREFIXES


class PropertyOntologyWriter:
    @staticmethod
    def write_prefixes(output: TextIO):
        output.write(TURTLE_PREFIXES)

    @staticmethod
    def write_property_metadata(output: TextIO, shape: PropertyShape):
        """Write the wikibase:Property declaration and its predicate links"""
        pid = shape.pid
        preds = shape.predicates

        links = [
            ("wikibase:propertyType", f"<{shape.datatype.value}>"),
            ("wikibase:directClaim", preds.direct),
            ("wikibase:claim", f"p:{pid}"),
            ("wikibase:statementProperty", preds.statement),
            ("wikibase:statementValue", preds.value_node),
            ("wikibase:qualifier", preds.qualifier),
            ("wikibase:qualifierValue", preds.qualifier_value),
            ("wikibase:reference", preds.reference),
            ("wikibase:referenceValue", preds.reference_value),
            ("wikibase:directClaimNormalized", preds.direct_normalized),
            ("wikibase:statementValueNormalized", preds.statement_normalized),
            ("wikibase:qualifierValueNormalized", preds.qualifier_normalized),
            ("wikibase:referenceValueNormalized", preds.reference_normalized),
            ("wikibase:novalue", f"wdno:{pid}"),
        ]
        links = [(predicate, obj) for predicate, obj in links if obj]

        output.write(f"wd:{pid} a wikibase:Property ;\n")
        for predicate, obj in links[:-1]:
            output.write(f"\t{predicate} {obj} ;\n")
        predicate, obj = links[-1]
        output.write(f"\t{predicate} {obj} .\n")

    @staticmethod
    def write_property(output: TextIO, shape: PropertyShape):
        """Write OWL declarations for every predicate of the property"""
        preds = shape.predicates
        owl_type = get_owl_type(shape.datatype)

        output.write(f"p:{shape.pid} a owl:ObjectProperty .\n")
        for predicate in (preds.direct, preds.statement, preds.qualifier, preds.reference):
            output.write(f"{predicate} a {owl_type} .\n")

        value_predicates = (
            preds.value_node,
            preds.qualifier_value,
            preds.reference_value,
            preds.direct_normalized,
            preds.statement_normalized,
            preds.qualifier_normalized,
            preds.reference_normalized,
        )
        for predicate in value_predicates:
            if predicate:
                output.write(f"{predicate} a owl:ObjectProperty .\n")
