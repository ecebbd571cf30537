"""
Line-oriented terminal front end for the catalog client.

Renders the current page of the derived view as a table and reads one
command per line. Rows are addressed by their number on the current page.
"""

from .formatting import format_currency, format_timestamp, format_weight
from .forms import FORM_FIELDS
from .session import CatalogSession

HELP_TEXT = """Commands:
  search <text>              filter by name or creation date (empty clears)
  sort newest|price|weight   change the sort order
  next | prev | page <n>     move between pages
  add                        create a product
  edit <row>                 edit the product in that row
  show <row>                 print the full record
  delete <row>               delete the product in that row
  reload                     fetch the product list again
  help                       show this help
  quit                       leave"""

RETRY_PROMPT = 'Edit and try again?'

COLUMNS = ('#', 'Created At', 'Name', 'Weight', 'Price')

FIELD_LABELS = {
    'name': 'Name',
    'weight': 'Weight (kg)',
    'price': 'Price',
}


class CatalogTerminal:
    """
    Args:
        gateway: ProductGateway the session talks to
        stdout: writable stream
        input_func: callable(prompt) -> str, defaults to input()
    """

    def __init__(self, gateway, stdout, input_func=input):
        self.stdout = stdout
        self.input = input_func
        self.session = CatalogSession(gateway, confirm=self.confirm, alert=self.alert)

    def write(self, text=''):
        self.stdout.write(f'{text}\n')

    def confirm(self, message):
        answer = self.input(f'{message} [y/N] ')
        return answer.strip().lower() in ('y', 'yes')

    def alert(self, message):
        self.write(f'! {message}')

    # Rendering

    def render(self):
        state = self.session.state
        view = self.session.view

        if state.error:
            self.write(f'Error: {state.error}')
        if state.loading:
            self.write('Loading...')
            return
        if view.is_empty:
            self.write('No products found.')
            return

        rows = [COLUMNS]
        for index, record in enumerate(view.items, start=1):
            rows.append((
                str(index),
                format_timestamp(record.created_at),
                record.name,
                format_weight(record.weight),
                format_currency(record.price),
            ))
        widths = [max(len(row[column]) for row in rows) for column in range(len(COLUMNS))]
        for row in rows:
            self.write('  '.join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())

        previous = '< prev' if view.has_previous else '      '
        following = 'next >' if view.has_next else ''
        self.write(f'{previous}   Page {view.page} of {view.total_pages}   {following}'.rstrip())

    # Commands

    def _row(self, argument):
        """Record shown at the 1-based row number on the current page"""
        items = self.session.view.items
        try:
            index = int(argument)
        except (TypeError, ValueError):
            index = 0
        if not 1 <= index <= len(items):
            self.alert(f'No row {argument!r} on this page')
            return None
        return items[index - 1]

    def _fill_form(self):
        form = self.session.state.form
        for name in FORM_FIELDS:
            current = getattr(form, name)
            suffix = f' [{current}]' if current else ''
            value = self.input(f'{FIELD_LABELS[name]}{suffix}: ')
            if value.strip():
                self.session.edit_field(name, value)

    def _save_form(self):
        """
        Prompt for the form fields and submit them.

        A rejected save leaves the form open with the typed values, which
        become the defaults of the next round. Declining to retry closes it.
        """
        while True:
            self._fill_form()
            if self.session.save():
                self.write('Saved.')
                return
            state = self.session.state
            if not state.form_open:
                return
            if state.error:
                self.write(f'Error: {state.error}')
            if not self.confirm(RETRY_PROMPT):
                self.session.close_form()
                return

    def handle(self, line):
        """Run one command line; returns False when the user quits"""
        command, _, argument = line.strip().partition(' ')
        command = command.lower()
        argument = argument.strip()

        if command in ('quit', 'exit', 'q'):
            return False
        if command == '':
            pass
        elif command == 'help':
            self.write(HELP_TEXT)
            return True
        elif command == 'search':
            self.session.search(argument)
        elif command == 'sort':
            try:
                self.session.sort_by(argument or 'newest')
            except ValueError:
                self.alert('Sort by newest, price or weight')
        elif command == 'next':
            self.session.next_page()
        elif command == 'prev':
            self.session.previous_page()
        elif command == 'page':
            try:
                self.session.go_to_page(int(argument))
            except ValueError:
                self.alert('Page must be a number')
        elif command == 'add':
            self.session.open_add()
            self._save_form()
        elif command == 'edit':
            record = self._row(argument)
            if record is not None:
                self.session.open_edit(record.id)
                self._save_form()
        elif command == 'show':
            record = self._row(argument)
            if record is not None:
                self.write(self.session.show(record.id))
                return True
        elif command == 'delete':
            record = self._row(argument)
            if record is not None:
                self.session.delete(record.id)
        elif command == 'reload':
            self.session.load()
        else:
            self.alert(f'Unknown command {command!r}, type help')
            return True

        self.render()
        return True

    def run(self):
        self.session.load()
        self.render()
        while True:
            try:
                line = self.input('catalog> ')
            except (EOFError, KeyboardInterrupt):
                self.write()
                break
            if not self.handle(line):
                break
