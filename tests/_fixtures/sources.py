"""Representative component sources shared by extractor and pipeline tests."""

FILLED_BUTTON = """
    /**
     * @license
     * Copyright 2021 Google LLC
     * SPDX-License-Identifier: Apache-2.0
     */

    import {customElement} from 'lit/decorators.js';

    import {FilledButton} from './internal/filled-button.js';

    declare global {
      interface HTMLElementTagNameMap {
        'md-filled-button': MdFilledButton;
      }
    }

    @customElement('md-filled-button')
    /**
     * Buttons help people take action, such as sending an email, sharing a
     * document, or liking a comment.
     *
     * @final
     * @suppress {visibility}
     */
    export class MdFilledButton extends FilledButton {
      /**
       * Whether or not the button is disabled.
       */
      @property({type: Boolean, reflect: true}) disabled = false;

      /**
       * The URL that the link button points to.
       */
      @property() href = '';
    }
"""

OUTLINED_BUTTON = """
    import {customElement} from 'lit/decorators.js';

    import {Button} from './internal/button.js';

    @customElement("md-outlined-button")
    export class MdOutlinedButton extends Button {}
"""

BUTTON_INTERNAL = """
    /**
     * A button component.
     *
     * @fires click {MouseEvent} Fired when the button is clicked.
     * @fires change {Event} Fired when the selection changes.
     */
    export abstract class Button extends LitElement {}
"""

BUTTON_INTERNAL_LATER = """
    /**
     * @fires focus {FocusEvent} Never reached because an earlier file wins.
     */
    export class FilledButton extends Button {}
"""

DIVIDER = """
    import {customElement} from 'lit/decorators.js';

    @customElement('md-divider')
    export class MdDivider extends Divider {}
"""
