"""
Demonstrates bean graph traversal over a small user/contact model.
Shows cycle detection, inverse relations, null relations and pruning.
"""

import logging

from beangraph import (
    BeanVisitor,
    BindingCollector,
    Customer,
    DynamicBean,
    configure_logging,
    get_visitor_config,
)

CUSTOMER = Customer.model_validate(
    {
        "name": "demo",
        "modules": {
            "admin": {
                "name": "admin",
                "documents": {
                    "User": {
                        "attributes": [
                            {"name": "userName"},
                            {"name": "contact", "kind": "association", "document_name": "Contact"},
                        ]
                    },
                    "Contact": {
                        "attributes": [
                            {"name": "name"},
                            {"name": "addresses", "kind": "collection", "document_name": "Address"},
                            {"name": "user", "kind": "inverseOne", "document_name": "User"},
                        ]
                    },
                    "Address": {
                        "attributes": [
                            {"name": "street"},
                            {"name": "country", "kind": "association", "document_name": "Country"},
                        ]
                    },
                    "Country": {"attributes": [{"name": "code"}]},
                },
            }
        },
    }
)


def build_graph() -> DynamicBean:
    """Build a user whose contact points back at the user."""
    australia = DynamicBean(biz_module="admin", biz_document="Country", code="AU")
    contact = DynamicBean(
        biz_module="admin",
        biz_document="Contact",
        name="Mike",
        addresses=[
            DynamicBean(biz_module="admin", biz_document="Address", street="1 Main St", country=australia),
            DynamicBean(biz_module="admin", biz_document="Address", street="2 High St"),
        ],
    )
    user = DynamicBean(biz_module="admin", biz_document="User", userName="mike", contact=contact)
    contact.user = user
    return user


def show(title: str, visitor: BeanVisitor, collector: BindingCollector, user: DynamicBean):
    visitor.visit(CUSTOMER.module_document("admin", "User"), user, CUSTOMER)
    print(title)
    for step in collector.get_trail():
        marker = " (revisit)" if step["revisit"] else ""
        bean = step["bean"] if step["bean"] is not None else "<null>"
        print(f"  {step['binding'] or '<root>'}: {step['document']} {bean}{marker}")
    collector.clear()


def main():
    configure_logging()
    user = build_graph()
    collector = BindingCollector()

    show("Defaults from environment:", BeanVisitor.from_config(get_visitor_config(), collector), collector, user)
    show("With inverses and revisits:", BeanVisitor(False, True, False, True, callback=collector), collector, user)
    show("With nulls:", BeanVisitor(True, False, False, callback=collector), collector, user)

    pruned = BindingCollector(descend=lambda binding, document, bean: not binding.startswith("contact.addresses"))
    show("Pruned below addresses:", BeanVisitor(False, False, False, callback=pruned), pruned, user)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
