"""HTML page templates for the error handlers.

Templates are rendered by a Jinja2 environment with autoescaping enabled, so
exception messages, paths and traces are HTML-escaped.
"""

from jinja2 import DictLoader, Environment, select_autoescape

ERROR_PAGE = """\
<html><head><meta http-equiv='Content-Type' content='text/html; charset=utf-8'>
<title>{{ title }}</title><style>body{margin:0;padding:70px 50px;font: 14px/1.5 Menlo, Monaco, Consolas, 'Courier New', monospace;}
h1{margin:0;font-size:48px;font-weight:normal;line-height:48px;}
strong{display:inline-block;width:78px;}
pre{
font: 13px/1.5 Menlo, Monaco, Consolas, 'Courier New', monospace;background-color: #f6f8fa;
border-radius: 3px;padding: 16px;border: 1px solid #dedede;overflow-x: auto;
}
</style></head><body><h1>{{ title }}</h1>
{%- if records %}
<p>The application could not run because of the following error:</p>
<h2>Details</h2>
{%- for record in records %}
{%- if not loop.first %}
<h2>Previous exception</h2>
{%- endif %}
<div><strong>Exception:</strong> {{ record.type }}</div>
{%- if record.code %}
<div><strong>Code:</strong> {{ record.code }}</div>
{%- endif %}
<div><strong>Message:</strong> {{ record.message }}</div>
{%- if record.file %}
<div><strong>Position:</strong> {{ record.file }} line <b>{{ record.line }}</b></div>
{%- endif %}
{%- if record.trace %}
<h2>Trace</h2>
<pre>{{ record.trace }}</pre>
{%- endif %}
{%- endfor %}
{%- else %}
<p>A website error has occurred. Sorry for the temporary inconvenience.</p>
{%- endif %}
</body></html>
"""

NOT_ALLOWED_PAGE = """\
<html>
    <head>
        <title>Method not allowed</title>
        <style>
            body{
                margin:0;
                padding:30px;
                font:12px/1.5 Helvetica,Arial,Verdana,sans-serif;
            }
            h1{
                margin:0;
                font-size:48px;
                font-weight:normal;
                line-height:48px;
            }
        </style>
    </head>
    <body>
        <h1>Method not allowed</h1>
        <p>Method not allowed. Must be one of: <strong>{{ allow }}</strong></p>
    </body>
</html>
"""

env = Environment(
    loader=DictLoader({
        'error.html': ERROR_PAGE,
        'not_allowed.html': NOT_ALLOWED_PAGE,
    }),
    autoescape=select_autoescape(['html']),
)


def render(name: str, **context) -> str:
    return env.get_template(name).render(**context)


__all__ = ['render', 'env']
