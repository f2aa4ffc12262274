# cmadness

Two small programs in one package:

- **a static-file HTTP server** (`cmadness.webserver`) that serves files
  and directory listings from a web root, with one thread per connection
  and an access log;
- **a ray tracer** (`cmadness.raytracer`) that renders a fixed scene of two
  reflective spheres over a plane, lit by one point light, and writes it as
  a binary PPM image.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The web server

```
cmadness-serve <port> <web_root>
```

The server listens on all interfaces on the given port, prints
`Serving <web_root> on port <port>`, and answers each connection with a
single response before closing it:

- only `GET` is accepted; any other method gets `405`;
- the requested path is appended to `web_root`; if it does not exist the
  answer is `404`, if it cannot be read `403`;
- a directory gets an HTML index of its entries (`.` and `..` first, then
  the rest sorted by name);
- a file is sent with `Content-Type` and `Content-Length` headers.

On start-up the server, working in the current directory:

- appends access lines to `server.log`, in the form
  `[YYYY-MM-DD HH:MM:SS] <ip> "<path>" <status>`; if the file cannot be
  opened, nothing is logged;
- reads `mime.types` if it exists. Each line holds an extension and a
  content type separated by whitespace:

  ```
  html text/html
  css  text/css
  png  image/png
  ```

  Extensions match case-insensitively and later lines win; unknown
  extensions are served as `application/octet-stream`.

`SIGINT` and `SIGTERM` stop the server; it checks for a stop request about
every half second. Run with fewer than two arguments, or with a port that
is not an integer, it prints a usage line and exits with status 1.

### Library use

The server itself is `cmadness.webserver.server.serve(port, root, mime,
logger, state)`, with `MimeTypes` and `handle_request` / `build_response`
in `cmadness.webserver.http`, `AccessLogger` in `cmadness.webserver.logger`
and `ShutdownState` / `install_signal_handlers` in
`cmadness.webserver.shutdown`.

Further components are available on their own:

- `cmadness.webserver.config.load_config(path)` reads `listen_port`,
  `listen_ip`, `logfile` and `error_page` from lines such as
  `listen_port = 8080` into a `ServerConfig`; other lines are ignored, and
  a file that cannot be opened raises `OSError`. `ServerConfig` also holds
  `allow_ips`, `deny_ips` and a list of `VirtualHost` entries, which are
  filled in from code.
- `cmadness.webserver.access.access_allowed(ip, config)`: a denied address
  is always refused; an empty allow list admits everyone else.
- `cmadness.webserver.vhost.vhost_root_for(host, config)` returns the root
  of the first matching virtual host, or `None`.
- `cmadness.webserver.rate.RateLimiter` allows 100 requests per address in
  a 60-second window by default; `cleanup()` forgets expired addresses.
- `cmadness.webserver.auth.auth_check(header)` accepts HTTP Basic
  credentials for a single built-in account; `challenge_response(realm)`
  and `send_challenge(sock, realm)` produce the `401` challenge.
- `cmadness.webserver.errors.error_page(code, config)` builds an error
  response from the configured HTML page, or a built-in one.
- `cmadness.webserver.stats.RequestStats` counts requests and reports them
  as a JSON HTTP response.
- `cmadness.webserver.cgi.cgi_handle(path, sock, method, query, body)` runs
  a program with `REQUEST_METHOD`, `QUERY_STRING` and `CONTENT_LENGTH` set,
  the body on its standard input and its output sent straight to the
  socket, and returns its exit status.

```python
from cmadness.webserver.config import load_config
from cmadness.webserver.access import access_allowed
from cmadness.webserver.rate import RateLimiter

config = load_config("server.conf")
limiter = RateLimiter()
if access_allowed("203.0.113.7", config) and limiter.check("203.0.113.7"):
    ...
```

### What the server does not do

`cmadness-serve` does not read a configuration file, and does not apply
access lists, rate limits, authentication, custom error pages, virtual
hosts, CGI or request statistics; those components exist only for use
from code. It reads one request of at most 2047 bytes per connection,
speaks plain HTTP/1.1 only (no TLS, no compression, no HTTP/2) and does
not guard against paths that leave the web root.

## The ray tracer

```
cmadness-raytrace > image.ppm
cmadness-raytrace --width 320 --height 240 --threads 2 > small.ppm
```

By default it renders the built-in scene at 640×480 with four worker
threads and writes a binary PPM (`P6`) to standard output. The scene has
ambient, diffuse and specular lighting, hard shadows and up to two levels
of reflection.

From Python:

```python
from cmadness.raytracer.scene import default_scene
from cmadness.raytracer.render import render_scene
from cmadness.raytracer.ppm_cli import encode_ppm

pixels = render_scene(default_scene(), 320, 240, 2)
with open("image.ppm", "wb") as out:
    out.write(encode_ppm(pixels, 320, 240))
```

`render_scene` returns row-major RGB bytes and raises `ValueError` for
non-positive sizes or fewer than one thread. Scenes are built from
`SceneObject` (spheres and planes), `Light` and `Vec3`.

### What the ray tracer does not do

It renders only scenes built in code — there is no scene file format,
mesh loading, textures, animation or camera control (the eye sits at the
origin looking down −z) — and it writes PPM only.