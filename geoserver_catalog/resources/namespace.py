from .resource import ResourceInfo,Field,NameField,boolean

NAMESPACE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<namespace>
    <prefix>{{ name }}</prefix>
{% if uri %}
    <uri>{{ uri }}</uri>
{% endif %}
{% if isolated is not none %}
    <isolated>{{ isolated|xmlbool }}</isolated>
{% endif %}
</namespace>
"""

class Namespace(ResourceInfo):
    """
    A namespace is identified by its prefix, which is the name of the workspace sharing it
    """
    resource_type = "namespace"
    route = "namespaces"
    root_xpath = "namespace/name"
    member_xpath = ".//namespace"
    template = NAMESPACE_TEMPLATE

    name = NameField("prefix")
    uri = Field("uri")
    isolated = Field("isolated",boolean)

    @property
    def prefix(self):
        return self.name
