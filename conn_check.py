# conn_check.py
"""
MySQL connectivity check.

Reads MYSQL_HOST, MYSQL_PORT, MYSQL_DATABASE, MYSQL_USER and MYSQL_PASSWORD
from the environment, runs `select version()` and prints a verbose dump of
the rows. Optional MYSQL_AUTH_PLUGIN is passed to the driver as auth_plugin
when set. Errors from the driver are not caught: the traceback goes to
stderr and the process exits non-zero.
"""

# =========================
# Standard Library
# =========================
import os
import sys
from dataclasses import dataclass

# =========================
# Database
# =========================
import mysql.connector
# -------------------------------------------------------------------------



# ---------- CONFIG ----------
ENV_VARS = ("MYSQL_HOST", "MYSQL_PORT", "MYSQL_DATABASE", "MYSQL_USER", "MYSQL_PASSWORD")
CHARSET = "utf8"
VERSION_QUERY = "select version()"


@dataclass(frozen=True)
class ConnectionConfig:
    host: str
    port: str
    database: str
    user: str
    password: str
    auth_plugin: str = ""

    def connect_args(self):
        args = {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "charset": CHARSET,
            "user": self.user,
            "password": self.password,
        }
        if self.auth_plugin:
            args["auth_plugin"] = self.auth_plugin
        return args


def read_config(environ=None):
    """Unset variables come back as "" and are handed to the driver as-is."""
    env = os.environ if environ is None else environ
    return ConnectionConfig(
        host=env.get("MYSQL_HOST", ""),
        port=env.get("MYSQL_PORT", ""),
        database=env.get("MYSQL_DATABASE", ""),
        user=env.get("MYSQL_USER", ""),
        password=env.get("MYSQL_PASSWORD", ""),
        auth_plugin=env.get("MYSQL_AUTH_PLUGIN", ""),
    )
# -------------------------------------------------------------------------



# ---------- DATABASE CONNECTION ----------
def get_db(config):
    return mysql.connector.connect(**config.connect_args())


def fetch_version(conn):
    cur = conn.cursor(dictionary=True)
    cur.execute(VERSION_QUERY)
    rows = cur.fetchall()
    cur.close()
    return rows
# -------------------------------------------------------------------------



# ---------- DUMP ----------
def dump(value, indent=0):
    """
    Verbose rendering of `value` showing the type of every field:

        list(1) [
          [0] => dict(1) {
            ['version()'] => str(6) '8.0.36'
          }
        ]
    """
    pad = "  " * indent
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return f"bool({value})"
    if isinstance(value, (int, float)):
        return f"{type(value).__name__}({value})"
    if isinstance(value, str):
        return f"str({len(value)}) {value!r}"
    if isinstance(value, (bytes, bytearray)):
        return f"{type(value).__name__}({len(value)}) {bytes(value)!r}"
    if isinstance(value, dict):
        lines = [f"dict({len(value)}) {{"]
        for key, item in value.items():
            lines.append(f"{pad}  [{key!r}] => {dump(item, indent + 1)}")
        lines.append(pad + "}")
        return "\n".join(lines)
    if isinstance(value, (list, tuple)):
        lines = [f"{type(value).__name__}({len(value)}) ["]
        for i, item in enumerate(value):
            lines.append(f"{pad}  [{i}] => {dump(item, indent + 1)}")
        lines.append(pad + "]")
        return "\n".join(lines)
    # Decimal, datetime, etc.
    return f"{type(value).__name__}({value})"


def print_dump(rows, stream=None):
    print(dump(rows), file=stream or sys.stdout)
# -------------------------------------------------------------------------



# ---------- RUN ----------
def run(environ=None, stream=None):
    config = read_config(environ)
    conn = get_db(config)
    rows = fetch_version(conn)
    print_dump(rows, stream)
    conn.close()
    return rows


def main():
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
