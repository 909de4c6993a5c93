from manual_assistant.main import main

raise SystemExit(main())
