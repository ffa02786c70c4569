"""
form_fields.py - Generic resource form
Single responsibility: turn FormField declarations into inputs and read them back.
"""
import flet as ft

from inventary.config import COLOR_DANGER, COLOR_TEXT_MUTED
from inventary.domain.resources import FormField
from inventary.ui.helpers import format_marketplace, input_style, parse_marketplace


def _as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    if isinstance(value, str) and "T" in value and value[:4].isdigit():
        # date fields come back as full timestamps
        return value.split("T", 1)[0]
    return str(value)


class ResourceForm(ft.Column):
    def __init__(
        self,
        fields: tuple[FormField, ...],
        initial: dict | None = None,
        options: dict[str, list[str]] | None = None,
    ):
        super().__init__(spacing=14, tight=True, scroll=ft.ScrollMode.AUTO)
        self.fields = fields
        self.initial = initial or {}
        self.options = options or {}
        self.inputs: dict[str, ft.Control] = {}
        self.color_boxes: dict[str, list[ft.Checkbox]] = {}
        self.image_paths: dict[str, str] = {}
        self.error_texts: dict[str, ft.Text] = {}
        self.controls = [self._build_field(f) for f in fields]

    # -- building ---------------------------------------------------------

    def _choices(self, field: FormField) -> list[str]:
        if field.choices:
            return list(field.choices)
        return list(self.options.get(field.options_from or "", []))

    def _build_input(self, field: FormField) -> ft.Control:
        label = f"{field.label} *" if field.required else field.label
        value = self.initial.get(field.name)

        if field.kind == "bool":
            return ft.Switch(label=label, value=bool(value) if value is not None else True)

        if field.kind == "select":
            choices = self._choices(field)
            current = _as_text(value)
            if current and current not in choices:
                choices.append(current)
            return ft.Dropdown(
                label=label,
                options=[ft.dropdown.Option(c, c) for c in choices],
                value=current or None,
                **input_style(),
            )

        if field.kind == "colors":
            selected = set(value if isinstance(value, list) else [v.strip() for v in _as_text(value).split(",") if v.strip()])
            choices = self._choices(field)
            if choices:
                boxes = [ft.Checkbox(label=c, value=c in selected) for c in choices]
                self.color_boxes[field.name] = boxes
                return ft.Column(
                    [
                        ft.Text(label, size=12, color=COLOR_TEXT_MUTED),
                        ft.Row(boxes, wrap=True, spacing=8, run_spacing=4),
                    ],
                    spacing=4,
                )
            return ft.TextField(label=label, value=", ".join(sorted(selected)), **input_style())

        if field.kind == "marketplace":
            return ft.TextField(
                label=label,
                value=format_marketplace(value),
                multiline=True,
                min_lines=2,
                max_lines=6,
                hint_text="tokopedia=https://...",
                **input_style(),
            )

        if field.kind == "image":
            path_text = ft.Text(_as_text(value) or "Belum ada file", size=12, color=COLOR_TEXT_MUTED)

            async def pick(_e, name=field.name, target=path_text):
                files = await ft.FilePicker().pick_files(
                    allow_multiple=False, file_type=ft.FilePickerFileType.IMAGE
                )
                if files:
                    self.image_paths[name] = files[0].path
                    target.value = files[0].name
                    target.update()

            return ft.Row(
                [
                    ft.OutlinedButton(label, icon=ft.Icons.UPLOAD_FILE, on_click=pick),
                    path_text,
                ],
                spacing=12,
            )

        return ft.TextField(
            label=label,
            value=_as_text(value),
            multiline=field.kind == "multiline",
            min_lines=3 if field.kind == "multiline" else None,
            max_lines=6 if field.kind == "multiline" else None,
            keyboard_type=ft.KeyboardType.NUMBER if field.kind == "number" else None,
            hint_text="YYYY-MM-DD" if field.kind == "date" else None,
            **input_style(),
        )

    def _build_field(self, field: FormField) -> ft.Control:
        control = self._build_input(field)
        self.inputs[field.name] = control
        error = ft.Text("", color=COLOR_DANGER, size=12, visible=False)
        self.error_texts[field.name] = error
        return ft.Column([control, error], spacing=2, tight=True)

    # -- reading ----------------------------------------------------------

    def values(self) -> dict:
        """Raw values for validate_form(); image fields are excluded."""
        data = {}
        for field in self.fields:
            control = self.inputs[field.name]
            if field.kind == "image":
                continue
            if field.kind == "colors" and field.name in self.color_boxes:
                data[field.name] = [box.label for box in self.color_boxes[field.name] if box.value]
            elif field.kind == "marketplace":
                data[field.name] = parse_marketplace(control.value)
            elif field.kind == "bool":
                data[field.name] = bool(control.value)
            else:
                data[field.name] = control.value
        return data

    def files(self) -> dict[str, list[str]]:
        return {name: [path] for name, path in self.image_paths.items()}

    def show_errors(self, errors: dict[str, str]) -> None:
        for name, text in self.error_texts.items():
            message = errors.get(name, "")
            text.value = message
            text.visible = bool(message)

    def clear_errors(self) -> None:
        self.show_errors({})
