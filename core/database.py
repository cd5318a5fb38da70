"""
Database settings helpers.
"""

import dj_database_url


POSTGRES_ENGINES = {
    'django.db.backends.postgresql',
    'django.contrib.gis.db.backends.postgis',
}


def database_config(url, statement_timeout=None, conn_max_age=600):
    """
    Parse a database URL into a Django DATABASES entry.

    On PostgreSQL a server-side ``statement_timeout`` (seconds) is added so a
    hung query is cancelled by the server. Other backends have no such option;
    there only the aggregator's deadline applies, and it is checked after each
    query returns.
    """
    database = dj_database_url.parse(url, conn_max_age=conn_max_age)

    if statement_timeout and database['ENGINE'] in POSTGRES_ENGINES:
        options = database.setdefault('OPTIONS', {})
        # An explicit ?options=... on the URL wins
        options.setdefault('options', f'-c statement_timeout={int(statement_timeout * 1000)}')

    return database
