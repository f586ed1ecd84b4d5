"""Extension and filename tables.

Keys of ``EXTENSIONS`` and ``EXTENSIONS_NEED_BINARY_CHECK`` are lowercase and
carry no leading dot. Keys of ``NAMES`` are matched exactly, case included.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Set

from tagsniff.tags import TagSet


def _freeze(table: Dict[str, Set[str]]) -> Mapping[str, TagSet]:
    return MappingProxyType({key: frozenset(tags) for key, tags in table.items()})


_EXTENSIONS: Dict[str, Set[str]] = {
    "adoc": {"text", "asciidoc"},
    "ai": {"binary", "adobe-illustrator"},
    "aj": {"text", "aspectj"},
    "asciidoc": {"text", "asciidoc"},
    "apinotes": {"text", "apinotes"},
    "asar": {"binary", "asar"},
    "asm": {"text", "asm"},
    "astro": {"text", "astro"},
    "avif": {"binary", "image", "avif"},
    "avsc": {"text", "avro-schema"},
    "bash": {"text", "shell", "bash"},
    "bat": {"text", "batch"},
    "bats": {"text", "shell", "bash", "bats"},
    "bazel": {"text", "bazel"},
    "bib": {"text", "bib"},
    "bmp": {"binary", "image", "bitmap"},
    "bz2": {"binary", "bzip2"},
    "bz3": {"binary", "bzip3"},
    "bzl": {"text", "bazel"},
    "c": {"text", "c"},
    "c++": {"text", "c++"},
    "c++m": {"text", "c++"},
    "cc": {"text", "c++"},
    "ccm": {"text", "c++"},
    "cfg": {"text"},
    "chs": {"text", "c2hs"},
    "cjs": {"text", "javascript"},
    "clj": {"text", "clojure"},
    "cljc": {"text", "clojure"},
    "cljs": {"text", "clojure", "clojurescript"},
    "cmake": {"text", "cmake"},
    "cnf": {"text"},
    "coffee": {"text", "coffee"},
    "conf": {"text"},
    "cpp": {"text", "c++"},
    "cppm": {"text", "c++"},
    "cr": {"text", "crystal"},
    "crt": {"text", "pem"},
    "cs": {"text", "c#"},
    "csproj": {"text", "xml", "csproj"},
    "csh": {"text", "shell", "csh"},
    "cson": {"text", "cson"},
    "css": {"text", "css"},
    "csv": {"text", "csv"},
    "cts": {"text", "ts"},
    "cu": {"text", "cuda"},
    "cue": {"text", "cue"},
    "cuh": {"text", "cuda"},
    "cxx": {"text", "c++"},
    "cxxm": {"text", "c++"},
    "cylc": {"text", "cylc"},
    "dart": {"text", "dart"},
    "dbc": {"text", "dbc"},
    "def": {"text", "def"},
    "dll": {"binary"},
    "dtd": {"text", "dtd"},
    "ear": {"binary", "zip", "jar"},
    "edn": {"text", "clojure", "edn"},
    "ejs": {"text", "ejs"},
    "ejson": {"text", "json", "ejson"},
    "elm": {"text", "elm"},
    "env": {"text", "dotenv"},
    "eot": {"binary", "eot"},
    "eps": {"binary", "eps"},
    "erb": {"text", "erb"},
    "erl": {"text", "erlang"},
    "ex": {"text", "elixir"},
    "exe": {"binary"},
    "exs": {"text", "elixir"},
    "eyaml": {"text", "yaml"},
    "f03": {"text", "fortran"},
    "f08": {"text", "fortran"},
    "f90": {"text", "fortran"},
    "f95": {"text", "fortran"},
    "feature": {"text", "gherkin"},
    "fish": {"text", "fish"},
    "fits": {"binary", "fits"},
    "fs": {"text", "f#"},
    "fsproj": {"text", "xml", "fsproj"},
    "fsx": {"text", "f#", "f#script"},
    "gd": {"text", "gdscript"},
    "gemspec": {"text", "ruby"},
    "geojson": {"text", "geojson", "json"},
    "ggb": {"binary", "zip", "ggb"},
    "gif": {"binary", "image", "gif"},
    "gleam": {"text", "gleam"},
    "go": {"text", "go"},
    "gotmpl": {"text", "gotmpl"},
    "gpx": {"text", "gpx", "xml"},
    "graphql": {"text", "graphql"},
    "gradle": {"text", "groovy"},
    "groovy": {"text", "groovy"},
    "gyb": {"text", "gyb"},
    "gyp": {"text", "gyp", "python"},
    "gypi": {"text", "gyp", "python"},
    "gz": {"binary", "gzip"},
    "h": {"text", "header", "c", "c++"},
    "hbs": {"text", "handlebars"},
    "hcl": {"text", "hcl"},
    "hh": {"text", "header", "c++"},
    "hpp": {"text", "header", "c++"},
    "hrl": {"text", "erlang"},
    "hs": {"text", "haskell"},
    "htm": {"text", "html"},
    "html": {"text", "html"},
    "hxx": {"text", "header", "c++"},
    "icns": {"binary", "icns"},
    "ico": {"binary", "icon"},
    "ics": {"text", "icalendar"},
    "idl": {"text", "idl"},
    "idr": {"text", "idris"},
    "inc": {"text", "inc"},
    "ini": {"text", "ini"},
    "inl": {"text", "inl", "c++"},
    "ino": {"text", "ino", "c++"},
    "inx": {"text", "xml", "inx"},
    "ipynb": {"text", "jupyter", "json"},
    "ixx": {"text", "c++"},
    "j2": {"text", "jinja"},
    "jade": {"text", "jade"},
    "jar": {"binary", "zip", "jar"},
    "java": {"text", "java"},
    "jenkins": {"text", "groovy", "jenkins"},
    "jenkinsfile": {"text", "groovy", "jenkins"},
    "jinja": {"text", "jinja"},
    "jinja2": {"text", "jinja"},
    "jl": {"text", "julia"},
    "jpeg": {"binary", "image", "jpeg"},
    "jpg": {"binary", "image", "jpeg"},
    "js": {"text", "javascript"},
    "json": {"text", "json"},
    "json5": {"text", "json5"},
    "jsonld": {"text", "json", "jsonld"},
    "jsonnet": {"text", "jsonnet"},
    "jsx": {"text", "jsx"},
    "key": {"text", "pem"},
    "kml": {"text", "kml", "xml"},
    "kt": {"text", "kotlin"},
    "kts": {"text", "kotlin"},
    "lean": {"text", "lean"},
    "lektorproject": {"text", "ini", "lektorproject"},
    "less": {"text", "less"},
    "lfm": {"text", "lazarus", "lazarus-form"},
    "lhs": {"text", "literate-haskell"},
    "libsonnet": {"text", "jsonnet"},
    "lidr": {"text", "idris"},
    "liquid": {"text", "liquid"},
    "lpi": {"text", "lazarus", "xml"},
    "lpr": {"text", "lazarus", "pascal"},
    "lr": {"text", "lektor"},
    "lua": {"text", "lua"},
    "m": {"text", "objective-c"},
    "m4": {"text", "m4"},
    "magik": {"text", "magik"},
    "make": {"text", "makefile"},
    "manifest": {"text", "manifest"},
    "map": {"text", "map"},
    "markdown": {"text", "markdown"},
    "md": {"text", "markdown"},
    "mdx": {"text", "mdx"},
    "meson": {"text", "meson"},
    "metal": {"text", "metal"},
    "mib": {"text", "mib"},
    "mjs": {"text", "javascript"},
    "mk": {"text", "makefile"},
    "ml": {"text", "ocaml"},
    "mli": {"text", "ocaml"},
    "mm": {"text", "c++", "objective-c++"},
    "modulemap": {"text", "modulemap"},
    "mscx": {"text", "xml", "musescore"},
    "mscz": {"binary", "zip", "musescore"},
    "mustache": {"text", "mustache"},
    "mts": {"text", "ts"},
    "myst": {"text", "myst"},
    "ngdoc": {"text", "ngdoc"},
    "nim": {"text", "nim"},
    "nims": {"text", "nim"},
    "nimble": {"text", "nimble"},
    "nix": {"text", "nix"},
    "njk": {"text", "nunjucks"},
    "otf": {"binary", "otf"},
    "p12": {"binary", "p12"},
    "pas": {"text", "pascal"},
    "patch": {"text", "diff"},
    "diff": {"text", "diff"},
    "pdf": {"binary", "pdf"},
    "pem": {"text", "pem"},
    "php": {"text", "php"},
    "php4": {"text", "php"},
    "php5": {"text", "php"},
    "phtml": {"text", "php"},
    "pl": {"text", "perl"},
    "plantuml": {"text", "plantuml"},
    "pm": {"text", "perl"},
    "png": {"binary", "image", "png"},
    "po": {"text", "pofile"},
    "pom": {"pom", "text", "xml"},
    "pp": {"text", "puppet"},
    "prisma": {"text", "prisma"},
    "properties": {"text", "java-properties"},
    "props": {"text", "xml", "msbuild"},
    "proto": {"text", "proto"},
    "ps1": {"text", "powershell"},
    "psd1": {"text", "powershell"},
    "psm1": {"text", "powershell"},
    "pug": {"text", "pug"},
    "puml": {"text", "plantuml"},
    "purs": {"text", "purescript"},
    "pxd": {"text", "cython"},
    "pxi": {"text", "cython"},
    "py": {"text", "python"},
    "pyi": {"text", "pyi"},
    "pyproj": {"text", "xml", "pyproj", "msbuild"},
    "pyt": {"text", "python"},
    "pyx": {"text", "cython"},
    "pyz": {"binary", "pyz"},
    "pyzw": {"binary", "pyz"},
    "qml": {"text", "qml"},
    "r": {"text", "r"},
    "rake": {"text", "ruby"},
    "rb": {"text", "ruby"},
    "resx": {"text", "resx", "xml"},
    "rng": {"text", "xml", "relax-ng"},
    "rs": {"text", "rust"},
    "rst": {"text", "rst"},
    "s": {"text", "asm"},
    "sas": {"text", "sas"},
    "sass": {"text", "sass"},
    "sbt": {"text", "sbt", "scala"},
    "sc": {"text", "scala"},
    "scala": {"text", "scala"},
    "scm": {"text", "scheme"},
    "scss": {"text", "scss"},
    "sh": {"text", "shell", "bash"},
    "sln": {"text", "sln"},
    "sls": {"text", "salt"},
    "so": {"binary"},
    "sol": {"text", "solidity"},
    "spec": {"text", "spec"},
    "sql": {"text", "sql"},
    "ss": {"text", "scheme"},
    "sty": {"text", "tex"},
    "styl": {"text", "stylus"},
    "sv": {"text", "system-verilog"},
    "svelte": {"text", "svelte"},
    "svg": {"text", "image", "svg", "xml"},
    "svh": {"text", "system-verilog"},
    "swf": {"binary", "swf"},
    "swift": {"text", "swift"},
    "swiftdeps": {"text", "swiftdeps"},
    "tac": {"text", "twisted", "python"},
    "tar": {"binary", "tar"},
    "tar.bz2": {"binary", "tar", "bzip2"},
    "tar.gz": {"binary", "tar", "gzip"},
    "tar.xz": {"binary", "tar", "xz"},
    "tar.zst": {"binary", "tar", "zstd"},
    "tbz2": {"binary", "tar", "bzip2"},
    "templ": {"text", "templ"},
    "tex": {"text", "tex"},
    "textproto": {"text", "textproto"},
    "tf": {"text", "terraform"},
    "tfvars": {"text", "terraform"},
    "tgz": {"binary", "tar", "gzip"},
    "thrift": {"text", "thrift"},
    "tiff": {"binary", "image", "tiff"},
    "toml": {"text", "toml"},
    "ts": {"text", "ts"},
    "tsv": {"text", "tsv"},
    "tsx": {"text", "tsx"},
    "ttf": {"binary", "ttf"},
    "twig": {"text", "twig"},
    "txsprofile": {"text", "ini", "txsprofile"},
    "txt": {"text", "plain-text"},
    "txtpb": {"text", "textproto"},
    "urdf": {"text", "xml", "urdf"},
    "v": {"text", "verilog"},
    "vb": {"text", "vb"},
    "vbproj": {"text", "xml", "vbproj"},
    "vcxproj": {"text", "xml", "vcxproj"},
    "vdx": {"text", "vdx"},
    "vh": {"text", "verilog"},
    "vhd": {"text", "vhdl"},
    "vim": {"text", "vim"},
    "vtl": {"text", "vtl"},
    "vue": {"text", "vue"},
    "war": {"binary", "zip", "jar"},
    "wav": {"binary", "audio", "wav"},
    "webp": {"binary", "image", "webp"},
    "whl": {"binary", "wheel", "zip"},
    "wkt": {"text", "wkt"},
    "woff": {"binary", "woff"},
    "woff2": {"binary", "woff2"},
    "wsdl": {"text", "xml", "wsdl"},
    "wsgi": {"text", "wsgi", "python"},
    "xhtml": {"text", "xml", "html", "xhtml"},
    "xacro": {"text", "xml", "urdf", "xacro"},
    "xctestplan": {"text", "json"},
    "xml": {"text", "xml"},
    "xq": {"text", "xquery"},
    "xql": {"text", "xquery"},
    "xqm": {"text", "xquery"},
    "xqu": {"text", "xquery"},
    "xquery": {"text", "xquery"},
    "xqy": {"text", "xquery"},
    "xsd": {"text", "xml", "xsd"},
    "xsl": {"text", "xml", "xsl"},
    "xslt": {"text", "xml", "xsl"},
    "xz": {"binary", "xz"},
    "yaml": {"text", "yaml"},
    "yamlld": {"text", "yaml", "yamlld"},
    "yang": {"text", "yang"},
    "yin": {"text", "xml", "yin"},
    "yml": {"text", "yaml"},
    "zcml": {"text", "xml", "zcml"},
    "zig": {"text", "zig"},
    "zip": {"binary", "zip"},
    "zpt": {"text", "zpt"},
    "zsh": {"text", "shell", "zsh"},
    "zst": {"binary", "zstd"},
}

_EXTENSIONS_NEED_BINARY_CHECK: Dict[str, Set[str]] = {
    "plist": {"plist"},
    "ppm": {"image", "ppm"},
}

_NAMES: Dict[str, Set[str]] = {
    ".babelrc": _EXTENSIONS["json"] | {"babelrc"},
    ".bash_aliases": _EXTENSIONS["bash"],
    ".bash_profile": _EXTENSIONS["bash"],
    ".bash_logout": _EXTENSIONS["bash"],
    ".bashrc": _EXTENSIONS["bash"],
    ".bazelrc": {"text", "bazelrc"},
    ".bowerrc": _EXTENSIONS["json"] | {"bowerrc"},
    ".browserslistrc": {"text", "browserslistrc"},
    ".clang-format": _EXTENSIONS["yaml"],
    ".clang-tidy": _EXTENSIONS["yaml"],
    ".codespellrc": _EXTENSIONS["ini"] | {"codespellrc"},
    ".coveragerc": _EXTENSIONS["ini"] | {"coveragerc"},
    ".cshrc": _EXTENSIONS["csh"],
    ".csslintrc": _EXTENSIONS["json"] | {"csslintrc"},
    ".dockerignore": {"text", "dockerignore"},
    ".editorconfig": {"text", "editorconfig"},
    ".envrc": _EXTENSIONS["bash"],
    ".flake8": _EXTENSIONS["ini"] | {"flake8"},
    ".gitattributes": {"text", "gitattributes"},
    ".gitconfig": _EXTENSIONS["ini"] | {"gitconfig"},
    ".gitignore": {"text", "gitignore"},
    ".gitlint": _EXTENSIONS["ini"] | {"gitlint"},
    ".gitmodules": {"text", "gitmodules"},
    ".hgrc": _EXTENSIONS["ini"] | {"hgrc"},
    ".isort.cfg": _EXTENSIONS["ini"] | {"isort"},
    ".jshintrc": _EXTENSIONS["json"] | {"jshintrc"},
    ".mailmap": {"text", "mailmap"},
    ".mention-bot": _EXTENSIONS["json"] | {"mention-bot"},
    ".npmignore": {"text", "npmignore"},
    ".pdbrc": _EXTENSIONS["py"] | {"pdbrc"},
    ".prettierignore": {"text", "gitignore", "prettierignore"},
    ".pypirc": _EXTENSIONS["ini"] | {"pypirc"},
    ".rstcheck.cfg": _EXTENSIONS["ini"],
    ".salt-lint": _EXTENSIONS["yaml"] | {"salt-lint"},
    ".yamllint": _EXTENSIONS["yaml"] | {"yamllint"},
    ".zlogin": _EXTENSIONS["zsh"],
    ".zlogout": _EXTENSIONS["zsh"],
    ".zprofile": _EXTENSIONS["zsh"],
    ".zshrc": _EXTENSIONS["zsh"],
    ".zshenv": _EXTENSIONS["zsh"],
    "AUTHORS": _EXTENSIONS["txt"],
    "bblayers.conf": {"text", "bitbake"},
    "bitbake.conf": {"text", "bitbake"},
    "BUILD": _EXTENSIONS["bzl"],
    "Cargo.toml": _EXTENSIONS["toml"] | {"cargo"},
    "Cargo.lock": _EXTENSIONS["toml"] | {"cargo-lock"},
    "CITATION.cff": _EXTENSIONS["yaml"],
    "CMakeLists.txt": _EXTENSIONS["cmake"],
    "CHANGELOG": _EXTENSIONS["txt"],
    "config.ru": _EXTENSIONS["rb"],
    "Containerfile": {"text", "dockerfile"},
    "CONTRIBUTING": _EXTENSIONS["txt"],
    "copy.bara.sky": _EXTENSIONS["bzl"],
    "COPYING": _EXTENSIONS["txt"],
    "Dockerfile": {"text", "dockerfile"},
    "Gemfile": _EXTENSIONS["rb"],
    "Gemfile.lock": {"text"},
    "GNUmakefile": _EXTENSIONS["mk"],
    "go.mod": {"text", "go-mod"},
    "go.sum": {"text", "go-sum"},
    "Jakefile": _EXTENSIONS["js"],
    "Jenkinsfile": _EXTENSIONS["jenkins"],
    "LICENSE": _EXTENSIONS["txt"],
    "MAINTAINERS": _EXTENSIONS["txt"],
    "Makefile": _EXTENSIONS["mk"],
    "meson.build": _EXTENSIONS["meson"],
    "meson_options.txt": _EXTENSIONS["meson"],
    "makefile": _EXTENSIONS["mk"],
    "NEWS": _EXTENSIONS["txt"],
    "NOTICE": _EXTENSIONS["txt"],
    "PATENTS": _EXTENSIONS["txt"],
    "Pipfile": _EXTENSIONS["toml"],
    "Pipfile.lock": _EXTENSIONS["json"],
    "PKGBUILD": {"text", "bash", "pkgbuild", "alpm"},
    "poetry.lock": _EXTENSIONS["toml"],
    "pom.xml": _EXTENSIONS["pom"],
    "pylintrc": _EXTENSIONS["ini"] | {"pylintrc"},
    "README": _EXTENSIONS["txt"],
    "Rakefile": _EXTENSIONS["rb"],
    "rebar.config": _EXTENSIONS["erl"],
    "setup.cfg": _EXTENSIONS["ini"],
    "sys.config": _EXTENSIONS["erl"],
    "sys.config.src": _EXTENSIONS["erl"],
    "Tiltfile": {"text", "tiltfile"},
    "Vagrantfile": _EXTENSIONS["rb"],
    "WORKSPACE": _EXTENSIONS["bzl"],
    "wscript": _EXTENSIONS["py"],
}

EXTENSIONS: Mapping[str, TagSet] = _freeze(_EXTENSIONS)
EXTENSIONS_NEED_BINARY_CHECK: Mapping[str, TagSet] = _freeze(_EXTENSIONS_NEED_BINARY_CHECK)
NAMES: Mapping[str, TagSet] = _freeze(_NAMES)


def _suffix_lengths(keys: Iterable[str]) -> int:
    return max((key.count(".") + 1 for key in keys), default=1)


# Longest dotted suffix registered in either extension table.
MAX_EXTENSION_PARTS: int = max(
    _suffix_lengths(EXTENSIONS), _suffix_lengths(EXTENSIONS_NEED_BINARY_CHECK)
)


__all__ = ["EXTENSIONS", "EXTENSIONS_NEED_BINARY_CHECK", "NAMES", "MAX_EXTENSION_PARTS"]
