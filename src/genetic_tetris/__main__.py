from genetic_tetris.cli.main import main

raise SystemExit(main())
