# Find and transform emoji unicode, tokens and emoticons in text.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026
# URL: https://github.com/xolox/python-emoji-parser

"""
Usage: emoji-parser [OPTIONS] COMMAND [TEXT...]

Find emoji written as unicode, as :name: tokens or as emoticons like :-) and
transform them. The text to process is given as command line arguments or,
when no arguments are given, read from standard input.

Supported commands:

- The 'tokenize' command replaces unicode emoji with :name: tokens.

- The 'detokenize' command replaces :name: tokens with unicode emoji.

- The 'emojize' command replaces all supported notations with unicode emoji.

- The 'html' command replaces all supported notations with HTML <img> tags
  that refer to emoji images (see the --images-path option).

- The 'find' command looks up each argument (a name, an emoticon or a
  unicode emoji) and prints a table with the matching emoji.

Supported options:

  -u, --unicode

    Find unicode emoji during 'emojize' and 'html'.

  -t, --tokens

    Find :name: tokens during 'emojize' and 'html'.

  -e, --emoticons

    Find emoticons during 'emojize' and 'html'. When none of the --unicode,
    --tokens and --emoticons options are given all notations are found.

  -p, --images-path=PATH

    The directory or URL where emoji images are stored, used by the 'html' and
    'find' commands. This can also be set using the 'images-path' option in
    the [emoji-parser] section of the configuration file.

  -v, --verbose

    Increase logging verbosity (can be repeated).

  -q, --quiet

    Decrease logging verbosity (can be repeated).

  -h, --help

    Show this message and exit.
"""

# Standard library modules.
import getopt
import html
import sys

# External dependencies.
import coloredlogs
from humanfriendly.tables import format_pretty_table
from humanfriendly.terminal import output, usage, warning
from property_manager import lazy_property, mutable_property
from update_dotdee import ConfigLoader
from verboselogs import VerboseLogger

# Modules included in our package.
from emoji_parser import EmojiParser
from emoji_parser.emoticons import BASE_EMOTICONS, expand_emoticons
from emoji_parser.matchers import ParseOptions

IMAGE_TEMPLATE = '<img class="emoji" src="{src}" alt="{alt}" title="{title}">'
"""The HTML that replaces emoji during ``emoji-parser html`` (a format string)."""

# Initialize a logger for this module.
logger = VerboseLogger(__name__)


def main():
    """Command line interface for the ``emoji-parser`` program."""
    # Enable logging to the terminal.
    coloredlogs.install()
    # Parse the command line options.
    program_opts = dict()
    parse_opts = dict()
    try:
        options, arguments = getopt.gnu_getopt(
            sys.argv[1:], "utep:vqh", ["unicode", "tokens", "emoticons", "images-path=", "verbose", "quiet", "help"]
        )
        for option, value in options:
            if option in ("-u", "--unicode"):
                parse_opts["unicode"] = True
            elif option in ("-t", "--tokens"):
                parse_opts["tokens"] = True
            elif option in ("-e", "--emoticons"):
                parse_opts["emoticons"] = True
            elif option in ("-p", "--images-path"):
                program_opts["images_path"] = value
            elif option in ("-v", "--verbose"):
                coloredlogs.increase_verbosity()
            elif option in ("-q", "--quiet"):
                coloredlogs.decrease_verbosity()
            elif option in ("-h", "--help"):
                usage(__doc__)
                sys.exit(0)
            else:
                assert False, "Unhandled option!"
        # Make sure the operator provided a command.
        if not arguments:
            usage(__doc__)
            sys.exit(0)
    except Exception as e:
        warning("Failed to parse command line arguments: %s", e)
        sys.exit(1)
    try:
        program = UserInterface(parse_options=ParseOptions(**parse_opts), **program_opts)
        # Validate the requested command.
        command_name = arguments.pop(0)
        method_name = "%s_cmd" % command_name
        if not hasattr(program, method_name):
            warning("Error: Invalid command name '%s'!", command_name)
            sys.exit(1)
        # Execute the requested command.
        command_fn = getattr(program, method_name)
        command_fn(arguments)
    except KeyboardInterrupt:
        logger.notice("Interrupted by Control-C ..")
        sys.exit(1)
    except Exception:
        logger.exception("Aborting due to unexpected exception!")
        sys.exit(1)


class UserInterface(EmojiParser):

    """The Python API for the command line interface for the ``emoji-parser`` program."""

    @lazy_property
    def config(self):
        """A dictionary with general user defined configuration options."""
        if "emoji-parser" in self.config_loader.section_names:
            return self.config_loader.get_options("emoji-parser")
        return {}

    @mutable_property(cached=True)
    def config_loader(self):
        r"""
        A :class:`~update_dotdee.ConfigLoader` object that provides access to the configuration.

        Configuration files are text files in the subset of `ini syntax`_
        supported by Python's configparser_ module. They can be located in the
        following places:

        =========  ==========================  ===============================
        Directory  Main configuration file     Modular configuration files
        =========  ==========================  ===============================
        /etc       /etc/emoji-parser.ini       /etc/emoji-parser.d/\*.ini
        ~          ~/.emoji-parser.ini         ~/.emoji-parser.d/\*.ini
        ~/.config  ~/.config/emoji-parser.ini  ~/.config/emoji-parser.d/\*.ini
        =========  ==========================  ===============================

        The available configuration files are loaded in the order given above, so that
        user specific configuration files override system wide configuration files.

        .. _configparser: https://docs.python.org/3/library/configparser.html
        .. _ini syntax: https://en.wikipedia.org/wiki/INI_file
        """
        return ConfigLoader(program_name="emoji-parser")

    @lazy_property
    def custom_emoticons(self):
        """
        User defined emoticons (a dictionary in the format of :data:`~emoji_parser.emoticons.BASE_EMOTICONS`).

        Emoticons can be defined in the ``[emoticons]`` section of the
        configuration file, each option maps the name of an emoji to one or
        more whitespace separated emoticons:

        .. code-block:: ini

           [emoticons]
           heart = <3
           sunglasses = 8-) B-)
        """
        if "emoticons" in self.config_loader.section_names:
            options = self.config_loader.get_options("emoticons")
            return dict((name, tuple(value.split())) for name, value in options.items())
        return {}

    @mutable_property(cached=True)
    def emoticons(self):
        """The built in emoticons extended with :attr:`custom_emoticons` (a dictionary)."""
        return expand_emoticons(BASE_EMOTICONS, self.custom_emoticons)

    @mutable_property(cached=True)
    def images_path(self):
        """The directory or URL where emoji images are stored (a string or :data:`None`)."""
        return self.config.get("images-path")

    @mutable_property
    def parse_options(self):
        """The notations to find (a :class:`~emoji_parser.matchers.ParseOptions` object)."""
        return ParseOptions()

    def detokenize_cmd(self, arguments):
        """Replace ``:name:`` tokens with unicode emoji."""
        output(self.detokenize(self.get_input(arguments)))

    def emojize_cmd(self, arguments):
        """Replace all supported notations with unicode emoji."""
        output(self.parse(self.get_input(arguments), lambda symbol: symbol.raw, **self.parse_options._asdict()))

    def find_cmd(self, arguments):
        """Look up emoji by name, emoticon or unicode and print a table."""
        rows = []
        for value in arguments:
            symbol = self.find(value)
            if symbol:
                rows.append([symbol.raw, symbol.name, ", ".join(symbol.aliases[1:]), self.get_image(symbol)])
            else:
                logger.warning("No emoji found for %r!", value)
        if rows:
            output(format_pretty_table(rows, ["Emoji", "Name", "Aliases", "Image"]))

    def html_cmd(self, arguments):
        """Replace all supported notations with HTML ``<img>`` tags."""
        output(self.text_to_html(self.get_input(arguments)))

    def tokenize_cmd(self, arguments):
        """Replace unicode emoji with ``:name:`` tokens."""
        output(self.tokenize(self.get_input(arguments)))

    def get_image(self, symbol):
        """Get the pathname of an emoji image based on :attr:`images_path`."""
        return self.filepath(symbol, self.images_path)

    def get_input(self, arguments):
        """Get the text to process from the command line arguments or standard input."""
        if arguments:
            return " ".join(arguments)
        logger.verbose("Reading text from standard input ..")
        return sys.stdin.read()

    def render_image(self, symbol):
        """Render the HTML ``<img>`` tag for an emoji."""
        return IMAGE_TEMPLATE.format(
            src=html.escape(self.get_image(symbol), quote=True),
            alt=html.escape(symbol.raw, quote=True),
            title=html.escape(":%s:" % symbol.name, quote=True),
        )

    def text_to_html(self, text):
        """
        Convert plain text with emoji to HTML.

        :param text: A fragment of plain text (a string).
        :returns: The HTML encoded text (a string).

        Emoji are replaced with ``<img>`` tags generated by
        :func:`render_image()`, all other text is escaped.
        """
        matcher = self.combined_pattern(self.parse_options)
        as_html = []
        position = 0
        for match in matcher.regex.finditer(text):
            as_html.append(html.escape(text[position : match.start()], quote=False))
            symbol = self.resolve_match(matcher, match)
            if symbol:
                as_html.append(self.render_image(symbol))
            else:
                as_html.append(html.escape(match.group(0), quote=False))
            position = match.end()
        as_html.append(html.escape(text[position:], quote=False))
        return "".join(as_html)
