import jinja2

jinja_env = jinja2.Environment(
    autoescape=jinja2.select_autoescape(default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True
)

def xmlbool(value):
    if isinstance(value,str):
        return "true" if value.lower() == "true" else "false"
    return "true" if value else "false"

jinja_env.filters["xmlbool"] = xmlbool

_templates = {}
def render(source,**context):
    """
    Render the xml template 'source' with context
    """
    template = _templates.get(source)
    if template is None:
        template = jinja_env.from_string(source)
        _templates[source] = template
    return template.render(**context)

def xmlvalue(value):
    if isinstance(value,bool):
        return "true" if value else "false"
    return "" if value is None else str(value)

jinja_env.filters["xmlvalue"] = xmlvalue

BBOX_MACRO = """{% macro bbox_element(tag,bbox) %}
    <{{ tag }}>
        <minx>{{ bbox.minx }}</minx>
        <miny>{{ bbox.miny }}</miny>
        <maxx>{{ bbox.maxx }}</maxx>
        <maxy>{{ bbox.maxy }}</maxy>
{% if bbox.crs %}
        <crs>{{ bbox.crs }}</crs>
{% endif %}
    </{{ tag }}>
{% endmacro %}
"""

KEYWORDS_MACRO = """{% macro keywords_element(keywords) %}
    <keywords>
{% for keyword in keywords %}
        <string>{{ keyword }}</string>
{% endfor %}
    </keywords>
{% endmacro %}
"""
