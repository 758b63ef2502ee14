"""Built-in file type tables.

The tables are declarative and frozen at import time. Callers that need
custom mappings pass their own ``ClassificationTable`` as overrides to the
classifier instead of editing these.
"""

from types import MappingProxyType

from .types import ClassificationTable, TypeInfo

IMAGE = "Image"
DOCUMENT = "Document"
SPREADSHEET = "Spreadsheet"
PRESENTATION = "Presentation"
CODE = "Code"
TEXT = "Text"
DATA = "Data"
CONFIG = "Config"
AUDIO = "Audio"
VIDEO = "Video"
ARCHIVE = "Archive"
FONT = "Font"
EXECUTABLE = "Executable"
UNKNOWN = "Unknown"

ICONS = MappingProxyType(
    {
        IMAGE: "🖼️",
        DOCUMENT: "📄",
        SPREADSHEET: "📊",
        PRESENTATION: "📽️",
        CODE: "💻",
        TEXT: "📝",
        DATA: "🗃️",
        CONFIG: "⚙️",
        AUDIO: "🎵",
        VIDEO: "🎬",
        ARCHIVE: "🗜️",
        FONT: "🔤",
        EXECUTABLE: "🧩",
        UNKNOWN: "📄",
    }
)

FOLDER_ICON = "📁"


def _info(mime_type: str, category: str, display_name: str) -> TypeInfo:
    return TypeInfo(
        mime_type=mime_type,
        category=category,
        display_name=display_name,
        icon=ICONS[category],
    )


DEFAULT_TYPE = _info("application/octet-stream", UNKNOWN, "File")
HIDDEN_FILE_TYPE = _info("application/octet-stream", UNKNOWN, "Hidden file")


# Exact, case-sensitive basenames. Checked before any extension rule.
SPECIAL_FILES = {
    ".gitignore": _info("text/plain", CONFIG, "Git ignore file"),
    ".gitattributes": _info("text/plain", CONFIG, "Git attributes file"),
    ".gitmodules": _info("text/plain", CONFIG, "Git submodules file"),
    ".gitkeep": _info("text/plain", CONFIG, "Git placeholder file"),
    ".dockerignore": _info("text/plain", CONFIG, "Docker ignore file"),
    ".npmignore": _info("text/plain", CONFIG, "npm ignore file"),
    ".npmrc": _info("text/plain", CONFIG, "npm configuration"),
    ".nvmrc": _info("text/plain", CONFIG, "nvm version file"),
    ".editorconfig": _info("text/plain", CONFIG, "EditorConfig file"),
    ".prettierrc": _info("application/json", CONFIG, "Prettier configuration"),
    ".eslintrc": _info("application/json", CONFIG, "ESLint configuration"),
    ".babelrc": _info("application/json", CONFIG, "Babel configuration"),
    ".env": _info("text/plain", CONFIG, "Environment variables"),
    ".env.local": _info("text/plain", CONFIG, "Local environment variables"),
    ".env.example": _info("text/plain", CONFIG, "Example environment variables"),
    ".bashrc": _info("text/x-shellscript", CONFIG, "Bash configuration"),
    ".bash_profile": _info("text/x-shellscript", CONFIG, "Bash profile"),
    ".profile": _info("text/x-shellscript", CONFIG, "Shell profile"),
    ".zshrc": _info("text/x-shellscript", CONFIG, "Zsh configuration"),
    ".vimrc": _info("text/plain", CONFIG, "Vim configuration"),
    ".htaccess": _info("text/plain", CONFIG, "Apache access file"),
    ".DS_Store": _info("application/octet-stream", DATA, "Finder metadata"),
    "Dockerfile": _info("text/x-dockerfile", CONFIG, "Dockerfile"),
    "Containerfile": _info("text/x-dockerfile", CONFIG, "Containerfile"),
    "docker-compose.yml": _info("application/yaml", CONFIG, "Docker Compose file"),
    "Makefile": _info("text/x-makefile", CODE, "Makefile"),
    "GNUmakefile": _info("text/x-makefile", CODE, "Makefile"),
    "CMakeLists.txt": _info("text/x-cmake", CODE, "CMake project file"),
    "Jenkinsfile": _info("text/x-groovy", CODE, "Jenkins pipeline"),
    "Vagrantfile": _info("text/x-ruby", CODE, "Vagrant configuration"),
    "Gemfile": _info("text/x-ruby", CODE, "Ruby Gemfile"),
    "Rakefile": _info("text/x-ruby", CODE, "Ruby Rakefile"),
    "Procfile": _info("text/plain", CONFIG, "Procfile"),
    "README": _info("text/plain", TEXT, "Readme"),
    "README.md": _info("text/markdown", TEXT, "Readme"),
    "LICENSE": _info("text/plain", TEXT, "License"),
    "LICENSE.md": _info("text/markdown", TEXT, "License"),
    "CHANGELOG": _info("text/plain", TEXT, "Changelog"),
    "CHANGELOG.md": _info("text/markdown", TEXT, "Changelog"),
    "AUTHORS": _info("text/plain", TEXT, "Authors"),
    "CODEOWNERS": _info("text/plain", CONFIG, "Code owners"),
    "package.json": _info("application/json", CONFIG, "npm package manifest"),
    "package-lock.json": _info("application/json", CONFIG, "npm lockfile"),
    "tsconfig.json": _info("application/json", CONFIG, "TypeScript configuration"),
    "pyproject.toml": _info("application/toml", CONFIG, "Python project file"),
    "requirements.txt": _info("text/plain", CONFIG, "Python requirements"),
    "Cargo.toml": _info("application/toml", CONFIG, "Cargo manifest"),
    "Cargo.lock": _info("application/toml", CONFIG, "Cargo lockfile"),
    "go.mod": _info("text/plain", CONFIG, "Go module file"),
    "go.sum": _info("text/plain", CONFIG, "Go checksum file"),
}


# Multi-segment suffixes. Longest match wins; equal lengths keep this order.
COMPOUND_EXTENSIONS = [
    (".tar.gz", _info("application/gzip", ARCHIVE, "Gzip Archive")),
    (".tar.bz2", _info("application/x-bzip2", ARCHIVE, "Bzip2 Archive")),
    (".tar.xz", _info("application/x-xz", ARCHIVE, "XZ Archive")),
    (".tar.zst", _info("application/zstd", ARCHIVE, "Zstandard Archive")),
    (".tar.lz4", _info("application/x-lz4", ARCHIVE, "LZ4 Archive")),
    (".min.js", _info("application/javascript", CODE, "JavaScript (minified)")),
    (".min.css", _info("text/css", CODE, "Stylesheet (minified)")),
    (".spec.js", _info("application/javascript", CODE, "JavaScript test")),
    (".test.js", _info("application/javascript", CODE, "JavaScript test")),
    (".spec.ts", _info("application/typescript", CODE, "TypeScript test")),
    (".test.ts", _info("application/typescript", CODE, "TypeScript test")),
    (".spec.tsx", _info("application/typescript", CODE, "React TypeScript test")),
    (".test.tsx", _info("application/typescript", CODE, "React TypeScript test")),
    (".config.js", _info("application/javascript", CONFIG, "JavaScript configuration")),
    (".config.ts", _info("application/typescript", CONFIG, "TypeScript configuration")),
    (".config.mjs", _info("application/javascript", CONFIG, "JavaScript configuration")),
    (".d.ts", _info("application/typescript", CODE, "TypeScript declarations")),
    (".js.map", _info("application/json", DATA, "Source map")),
    (".css.map", _info("application/json", DATA, "Source map")),
    (".user.js", _info("application/javascript", CODE, "Userscript")),
    (".tfstate.backup", _info("application/json", DATA, "Terraform state backup")),
    (".csv.gz", _info("application/gzip", DATA, "Compressed CSV")),
    (".json.gz", _info("application/gzip", DATA, "Compressed JSON")),
    (".ndjson.gz", _info("application/gzip", DATA, "Compressed NDJSON")),
    (".nii.gz", _info("application/gzip", IMAGE, "NIfTI Image")),
    (".fastq.gz", _info("application/gzip", DATA, "Compressed FASTQ")),
    (".vcf.gz", _info("application/gzip", DATA, "Compressed VCF")),
]


def _group(category: str, entries: dict[str, tuple[str, str]]) -> dict[str, TypeInfo]:
    return {
        ext: _info(mime_type, category, display_name)
        for ext, (mime_type, display_name) in entries.items()
    }


EXTENSIONS: dict[str, TypeInfo] = {}

EXTENSIONS.update(
    _group(
        IMAGE,
        {
            "jpg": ("image/jpeg", "JPEG Image"),
            "jpeg": ("image/jpeg", "JPEG Image"),
            "png": ("image/png", "PNG Image"),
            "gif": ("image/gif", "GIF Image"),
            "bmp": ("image/bmp", "Bitmap Image"),
            "svg": ("image/svg+xml", "SVG Image"),
            "webp": ("image/webp", "WebP Image"),
            "ico": ("image/vnd.microsoft.icon", "Icon"),
            "tif": ("image/tiff", "TIFF Image"),
            "tiff": ("image/tiff", "TIFF Image"),
            "heic": ("image/heic", "HEIC Image"),
            "heif": ("image/heif", "HEIF Image"),
            "avif": ("image/avif", "AVIF Image"),
            "psd": ("image/vnd.adobe.photoshop", "Photoshop Document"),
            "raw": ("image/x-raw", "RAW Image"),
            "cr2": ("image/x-canon-cr2", "Canon RAW Image"),
            "nef": ("image/x-nikon-nef", "Nikon RAW Image"),
            "dng": ("image/x-adobe-dng", "DNG Image"),
        },
    )
)

EXTENSIONS.update(
    _group(
        DOCUMENT,
        {
            "pdf": ("application/pdf", "PDF Document"),
            "doc": ("application/msword", "Word Document"),
            "docx": (
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                "Word Document",
            ),
            "odt": ("application/vnd.oasis.opendocument.text", "OpenDocument Text"),
            "rtf": ("application/rtf", "Rich Text Document"),
            "pages": ("application/vnd.apple.pages", "Pages Document"),
            "epub": ("application/epub+zip", "EPUB eBook"),
            "mobi": ("application/x-mobipocket-ebook", "Mobipocket eBook"),
            "tex": ("application/x-tex", "LaTeX Document"),
        },
    )
)

EXTENSIONS.update(
    _group(
        SPREADSHEET,
        {
            "xls": ("application/vnd.ms-excel", "Excel Spreadsheet"),
            "xlsx": (
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                "Excel Spreadsheet",
            ),
            "ods": (
                "application/vnd.oasis.opendocument.spreadsheet",
                "OpenDocument Spreadsheet",
            ),
            "numbers": ("application/vnd.apple.numbers", "Numbers Spreadsheet"),
        },
    )
)

EXTENSIONS.update(
    _group(
        PRESENTATION,
        {
            "ppt": ("application/vnd.ms-powerpoint", "PowerPoint Presentation"),
            "pptx": (
                "application/vnd.openxmlformats-officedocument.presentationml.presentation",
                "PowerPoint Presentation",
            ),
            "odp": (
                "application/vnd.oasis.opendocument.presentation",
                "OpenDocument Presentation",
            ),
            "key": ("application/vnd.apple.keynote", "Keynote Presentation"),
        },
    )
)

EXTENSIONS.update(
    _group(
        CODE,
        {
            "js": ("application/javascript", "JavaScript"),
            "mjs": ("application/javascript", "JavaScript Module"),
            "cjs": ("application/javascript", "CommonJS Module"),
            "jsx": ("text/jsx", "React JSX"),
            "ts": ("application/typescript", "TypeScript"),
            "tsx": ("application/typescript", "React TypeScript"),
            "py": ("text/x-python", "Python Script"),
            "pyi": ("text/x-python", "Python Stub"),
            "ipynb": ("application/x-ipynb+json", "Jupyter Notebook"),
            "rb": ("text/x-ruby", "Ruby Script"),
            "php": ("application/x-httpd-php", "PHP Script"),
            "java": ("text/x-java-source", "Java Source"),
            "kt": ("text/x-kotlin", "Kotlin Source"),
            "scala": ("text/x-scala", "Scala Source"),
            "go": ("text/x-go", "Go Source"),
            "rs": ("text/x-rust", "Rust Source"),
            "c": ("text/x-c", "C Source"),
            "h": ("text/x-c", "C Header"),
            "cpp": ("text/x-c++", "C++ Source"),
            "cc": ("text/x-c++", "C++ Source"),
            "hpp": ("text/x-c++", "C++ Header"),
            "cs": ("text/x-csharp", "C# Source"),
            "swift": ("text/x-swift", "Swift Source"),
            "m": ("text/x-objcsrc", "Objective-C Source"),
            "r": ("text/x-r", "R Script"),
            "jl": ("text/x-julia", "Julia Script"),
            "lua": ("text/x-lua", "Lua Script"),
            "pl": ("text/x-perl", "Perl Script"),
            "sh": ("application/x-sh", "Shell Script"),
            "bash": ("application/x-sh", "Bash Script"),
            "zsh": ("application/x-sh", "Zsh Script"),
            "ps1": ("text/x-powershell", "PowerShell Script"),
            "bat": ("application/x-bat", "Batch Script"),
            "sql": ("application/sql", "SQL Script"),
            "html": ("text/html", "HTML Document"),
            "htm": ("text/html", "HTML Document"),
            "css": ("text/css", "Stylesheet"),
            "scss": ("text/x-scss", "Sass Stylesheet"),
            "less": ("text/x-less", "Less Stylesheet"),
            "vue": ("text/x-vue", "Vue Component"),
            "svelte": ("text/x-svelte", "Svelte Component"),
            "dart": ("application/dart", "Dart Source"),
            "ex": ("text/x-elixir", "Elixir Source"),
            "erl": ("text/x-erlang", "Erlang Source"),
            "hs": ("text/x-haskell", "Haskell Source"),
            "tf": ("text/x-terraform", "Terraform Configuration"),
        },
    )
)

EXTENSIONS.update(
    _group(
        TEXT,
        {
            "txt": ("text/plain", "Text File"),
            "md": ("text/markdown", "Markdown Document"),
            "markdown": ("text/markdown", "Markdown Document"),
            "rst": ("text/x-rst", "reStructuredText Document"),
            "log": ("text/plain", "Log File"),
            "nfo": ("text/plain", "Info File"),
        },
    )
)

EXTENSIONS.update(
    _group(
        DATA,
        {
            "json": ("application/json", "JSON File"),
            "ndjson": ("application/x-ndjson", "NDJSON File"),
            "jsonl": ("application/jsonl", "JSON Lines File"),
            "xml": ("application/xml", "XML File"),
            "csv": ("text/csv", "CSV File"),
            "tsv": ("text/tab-separated-values", "TSV File"),
            "parquet": ("application/vnd.apache.parquet", "Parquet File"),
            "avro": ("application/avro", "Avro File"),
            "orc": ("application/x-orc", "ORC File"),
            "feather": ("application/vnd.apache.arrow.file", "Feather File"),
            "arrow": ("application/vnd.apache.arrow.file", "Arrow File"),
            "h5": ("application/x-hdf5", "HDF5 File"),
            "hdf5": ("application/x-hdf5", "HDF5 File"),
            "nc": ("application/x-netcdf", "NetCDF File"),
            "npy": ("application/x-npy", "NumPy Array"),
            "npz": ("application/x-npz", "NumPy Archive"),
            "pkl": ("application/x-pickle", "Pickle File"),
            "db": ("application/x-sqlite3", "Database File"),
            "sqlite": ("application/x-sqlite3", "SQLite Database"),
            "tfstate": ("application/json", "Terraform State"),
            "fastq": ("text/plain", "FASTQ File"),
            "fasta": ("text/plain", "FASTA File"),
            "bam": ("application/octet-stream", "BAM File"),
            "vcf": ("text/plain", "VCF File"),
        },
    )
)

EXTENSIONS.update(
    _group(
        CONFIG,
        {
            "yaml": ("application/yaml", "YAML File"),
            "yml": ("application/yaml", "YAML File"),
            "toml": ("application/toml", "TOML File"),
            "ini": ("text/plain", "INI File"),
            "cfg": ("text/plain", "Configuration File"),
            "conf": ("text/plain", "Configuration File"),
            "properties": ("text/plain", "Properties File"),
            "env": ("text/plain", "Environment File"),
            "lock": ("text/plain", "Lockfile"),
        },
    )
)

EXTENSIONS.update(
    _group(
        AUDIO,
        {
            "mp3": ("audio/mpeg", "MP3 Audio"),
            "wav": ("audio/wav", "WAV Audio"),
            "flac": ("audio/flac", "FLAC Audio"),
            "aac": ("audio/aac", "AAC Audio"),
            "ogg": ("audio/ogg", "Ogg Audio"),
            "oga": ("audio/ogg", "Ogg Audio"),
            "opus": ("audio/opus", "Opus Audio"),
            "m4a": ("audio/mp4", "MPEG-4 Audio"),
            "wma": ("audio/x-ms-wma", "Windows Media Audio"),
            "aiff": ("audio/aiff", "AIFF Audio"),
            "mid": ("audio/midi", "MIDI File"),
            "midi": ("audio/midi", "MIDI File"),
        },
    )
)

EXTENSIONS.update(
    _group(
        VIDEO,
        {
            "mp4": ("video/mp4", "MP4 Video"),
            "m4v": ("video/mp4", "MPEG-4 Video"),
            "avi": ("video/x-msvideo", "AVI Video"),
            "mov": ("video/quicktime", "QuickTime Video"),
            "wmv": ("video/x-ms-wmv", "Windows Media Video"),
            "flv": ("video/x-flv", "Flash Video"),
            "webm": ("video/webm", "WebM Video"),
            "mkv": ("video/x-matroska", "Matroska Video"),
            "mpeg": ("video/mpeg", "MPEG Video"),
            "mpg": ("video/mpeg", "MPEG Video"),
            "3gp": ("video/3gpp", "3GP Video"),
        },
    )
)

EXTENSIONS.update(
    _group(
        ARCHIVE,
        {
            "zip": ("application/zip", "ZIP Archive"),
            "rar": ("application/vnd.rar", "RAR Archive"),
            "7z": ("application/x-7z-compressed", "7-Zip Archive"),
            "tar": ("application/x-tar", "Tar Archive"),
            "gz": ("application/gzip", "Gzip Compressed File"),
            "tgz": ("application/gzip", "Gzip Archive"),
            "bz2": ("application/x-bzip2", "Bzip2 Compressed File"),
            "xz": ("application/x-xz", "XZ Compressed File"),
            "zst": ("application/zstd", "Zstandard Compressed File"),
            "lz4": ("application/x-lz4", "LZ4 Compressed File"),
            "jar": ("application/java-archive", "Java Archive"),
            "war": ("application/java-archive", "Web Application Archive"),
            "whl": ("application/zip", "Python Wheel"),
            "iso": ("application/x-iso9660-image", "Disk Image"),
            "dmg": ("application/x-apple-diskimage", "Apple Disk Image"),
        },
    )
)

EXTENSIONS.update(
    _group(
        FONT,
        {
            "ttf": ("font/ttf", "TrueType Font"),
            "otf": ("font/otf", "OpenType Font"),
            "woff": ("font/woff", "WOFF Font"),
            "woff2": ("font/woff2", "WOFF2 Font"),
            "eot": ("application/vnd.ms-fontobject", "Embedded OpenType Font"),
        },
    )
)

EXTENSIONS.update(
    _group(
        EXECUTABLE,
        {
            "exe": ("application/vnd.microsoft.portable-executable", "Windows Executable"),
            "msi": ("application/x-msi", "Windows Installer"),
            "dll": ("application/vnd.microsoft.portable-executable", "Windows Library"),
            "so": ("application/x-sharedlib", "Shared Library"),
            "dylib": ("application/x-mach-binary", "Dynamic Library"),
            "bin": ("application/octet-stream", "Binary File"),
            "apk": ("application/vnd.android.package-archive", "Android Package"),
            "deb": ("application/vnd.debian.binary-package", "Debian Package"),
            "rpm": ("application/x-rpm", "RPM Package"),
            "appimage": ("application/x-appimage", "AppImage"),
            "wasm": ("application/wasm", "WebAssembly Module"),
        },
    )
)


# Stored Content-Type fallback, used only when no filename rule matched.
CONTENT_TYPES = {
    "application/pdf": _info("application/pdf", DOCUMENT, "PDF Document"),
    "application/json": _info("application/json", DATA, "JSON File"),
    "application/xml": _info("application/xml", DATA, "XML File"),
    "application/zip": _info("application/zip", ARCHIVE, "ZIP Archive"),
    "application/gzip": _info("application/gzip", ARCHIVE, "Gzip Compressed File"),
    "application/x-gzip": _info("application/x-gzip", ARCHIVE, "Gzip Compressed File"),
    "application/x-tar": _info("application/x-tar", ARCHIVE, "Tar Archive"),
    "application/javascript": _info("application/javascript", CODE, "JavaScript"),
    "application/yaml": _info("application/yaml", CONFIG, "YAML File"),
    "application/x-yaml": _info("application/x-yaml", CONFIG, "YAML File"),
    "application/msword": _info("application/msword", DOCUMENT, "Word Document"),
    "application/vnd.ms-excel": _info(
        "application/vnd.ms-excel", SPREADSHEET, "Excel Spreadsheet"
    ),
    "application/wasm": _info("application/wasm", EXECUTABLE, "WebAssembly Module"),
    "text/csv": _info("text/csv", DATA, "CSV File"),
    "text/html": _info("text/html", CODE, "HTML Document"),
    "text/markdown": _info("text/markdown", TEXT, "Markdown Document"),
}

# Keyed by the major type of a MIME string ("image" in "image/png").
MAJOR_CONTENT_TYPES = {
    "image": (IMAGE, "Image"),
    "audio": (AUDIO, "Audio"),
    "video": (VIDEO, "Video"),
    "text": (TEXT, "Text File"),
    "font": (FONT, "Font"),
}


BUILTIN_TABLE = ClassificationTable.build(
    basenames=SPECIAL_FILES,
    compound_extensions=COMPOUND_EXTENSIONS,
    extensions=EXTENSIONS,
)
